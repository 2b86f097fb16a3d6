"""
Pydantic Schemas - Scoring Inputs, Outputs and Request Bodies

All records the engine reads and every result it returns, in one file for
simplicity. Field names are snake_case; the camelCase names used by the
portal's document store are accepted (and emitted by the API) as aliases.
"""

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from typing import Annotated, Optional, List, Dict, Union
from datetime import datetime
from enum import Enum


class PortalModel(BaseModel):
    """Base for every schema: accept both snake_case and camelCase keys."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)


# Stored documents carry bson ObjectIds; the engine works with their hex form
DocumentId = Annotated[str, BeforeValidator(str)]


# ============================================================
# ENUMS
# ============================================================

class Branch(str, Enum):
    CSE = "CSE"
    IT = "IT"
    ECE = "ECE"
    EEE = "EEE"
    MECH = "MECH"
    CIVIL = "CIVIL"
    CHEM = "CHEM"
    BIO = "BIO"
    OTHER = "OTHER"


class JobStatus(str, Enum):
    active = "active"
    closed = "closed"
    draft = "draft"
    paused = "paused"
    cancelled = "cancelled"


class ExperienceType(str, Enum):
    internship = "internship"
    fulltime = "fulltime"
    parttime = "parttime"


# Wildcard accepted in Eligibility.branches
ALL_BRANCHES = "ALL"


# ============================================================
# STUDENT PROFILE
# ============================================================

class PersonalInfo(PortalModel):
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    phone: Optional[str] = None
    roll_number: Optional[str] = Field(None, alias="rollNumber")
    branch: Optional[Branch] = None
    batch: Optional[int] = None
    current_semester: Optional[int] = Field(None, alias="currentSemester")


class Academics(PortalModel):
    cgpa: Optional[float] = Field(0.0, ge=0, le=10)
    tenth_marks: Optional[float] = Field(0.0, ge=0, le=100, alias="tenthMarks")
    twelfth_marks: Optional[float] = Field(0.0, ge=0, le=100, alias="twelfthMarks")
    backlogs: Optional[int] = Field(0, ge=0)
    achievements: Optional[List[str]] = Field(default_factory=list)


class Skills(PortalModel):
    technical: Optional[List[str]] = Field(default_factory=list)
    programming: Optional[List[str]] = Field(default_factory=list)
    frameworks: Optional[List[str]] = Field(default_factory=list)
    tools: Optional[List[str]] = Field(default_factory=list)
    # Not one of the four scored categories, but still a declared skill
    databases: Optional[List[str]] = Field(default_factory=list)


# The categories that feed the PRS and the eligibility skill check
SKILL_CATEGORIES = ("technical", "programming", "frameworks", "tools")


class Project(PortalModel):
    title: Optional[str] = None
    description: Optional[str] = None
    technologies: List[str] = []
    github_link: Optional[str] = Field(None, alias="githubLink")
    live_link: Optional[str] = Field(None, alias="liveLink")
    duration: Optional[str] = None


class Experience(PortalModel):
    company: Optional[str] = None
    role: Optional[str] = None
    type: Optional[ExperienceType] = None
    duration: Optional[str] = None
    description: Optional[str] = None


class StudentProfile(PortalModel):
    user_id: Optional[DocumentId] = Field(None, alias="userId")
    personal_info: Optional[PersonalInfo] = Field(default_factory=PersonalInfo, alias="personalInfo")
    academics: Optional[Academics] = Field(default_factory=Academics)
    skills: Optional[Skills] = Field(default_factory=Skills)
    projects: Optional[List[Project]] = Field(default_factory=list)
    experience: Optional[List[Experience]] = Field(default_factory=list)
    # Stored value only; the engine always recomputes
    placement_readiness_score: int = Field(0, ge=0, le=100, alias="placementReadinessScore")


# ============================================================
# JOB
# ============================================================

class Eligibility(PortalModel):
    branches: Optional[List[str]] = Field(default_factory=list)
    minimum_cgpa: Optional[float] = Field(0.0, ge=0, le=10, alias="minimumCGPA")
    allow_backlogs: Optional[bool] = Field(False, alias="allowBacklogs")
    max_backlogs: Optional[int] = Field(0, ge=0, alias="maxBacklogs")
    batch: Optional[List[int]] = Field(default_factory=list)
    required_skills: Optional[List[str]] = Field(default_factory=list, alias="requiredSkills")


class Job(PortalModel):
    id: Optional[DocumentId] = Field(None, alias="_id")
    title: Optional[str] = None
    company_id: Optional[DocumentId] = Field(None, alias="companyId")
    eligibility: Optional[Eligibility] = Field(default_factory=Eligibility)
    application_deadline: Optional[datetime] = Field(None, alias="applicationDeadline")
    status: JobStatus = JobStatus.draft


# ============================================================
# RESULTS
# ============================================================

class EligibilityResult(PortalModel):
    eligible: bool
    score: int = Field(..., ge=0, le=100)


class CategoryScore(PortalModel):
    score: int
    max_score: int = Field(100, alias="maxScore")
    feedback: str


class ReadinessResult(PortalModel):
    score: int = Field(..., ge=0, le=100)
    breakdown: Dict[str, CategoryScore] = {}


class MatchBreakdown(PortalModel):
    eligibility: int = 0
    skill_match: int = Field(0, alias="skillMatch")
    prs: int = 0


class MatchResult(PortalModel):
    overall_score: int = Field(0, alias="overallScore")
    breakdown: MatchBreakdown = Field(default_factory=MatchBreakdown)

    @classmethod
    def zero(cls) -> "MatchResult":
        """The fail-closed result: every score at its minimum."""
        return cls(overall_score=0, breakdown=MatchBreakdown())


class RankedJob(PortalModel):
    job: Job
    eligibility_score: int = Field(..., alias="eligibilityScore")


class RankedStudent(PortalModel):
    student: StudentProfile
    eligibility_score: int = Field(..., alias="eligibilityScore")


class JobMatch(PortalModel):
    job: Job
    match: MatchResult


class ApplicantMatch(PortalModel):
    student: StudentProfile
    match: MatchResult


class SkillRecommendation(PortalModel):
    target_role: str = Field(..., alias="targetRole")
    recommended: List[str]
    missing: List[str]
    has_skills: List[str] = Field(..., alias="hasSkills")


# ============================================================
# REQUEST BODIES
# ============================================================

class StudentJobRequest(PortalModel):
    student: StudentProfile
    job: Job


class RankJobsRequest(PortalModel):
    student: StudentProfile
    jobs: List[Job]
    open_only: bool = Field(False, alias="openOnly")


class RankStudentsRequest(PortalModel):
    job: Job
    students: List[StudentProfile]


class SkillRecommendationRequest(PortalModel):
    skills: Union[List[str], Dict[str, List[str]]] = []
    target_role: str = Field("software_developer", alias="targetRole")
