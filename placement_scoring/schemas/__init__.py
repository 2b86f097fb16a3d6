"""
Schemas module - scoring inputs, outputs and API request bodies.

- Inputs: StudentProfile, Job (read-only records supplied by the caller)
- Outputs: EligibilityResult, ReadinessResult, MatchResult and ranked lists
"""

from placement_scoring.schemas.schemas import (
    ALL_BRANCHES,
    SKILL_CATEGORIES,
    Academics,
    ApplicantMatch,
    Branch,
    CategoryScore,
    Eligibility,
    EligibilityResult,
    Experience,
    ExperienceType,
    Job,
    JobMatch,
    JobStatus,
    MatchBreakdown,
    MatchResult,
    PersonalInfo,
    Project,
    RankedJob,
    RankedStudent,
    ReadinessResult,
    SkillRecommendation,
    Skills,
    StudentProfile,
)

__all__ = [
    "ALL_BRANCHES",
    "SKILL_CATEGORIES",
    "Academics",
    "ApplicantMatch",
    "Branch",
    "CategoryScore",
    "Eligibility",
    "EligibilityResult",
    "Experience",
    "ExperienceType",
    "Job",
    "JobMatch",
    "JobStatus",
    "MatchBreakdown",
    "MatchResult",
    "PersonalInfo",
    "Project",
    "RankedJob",
    "RankedStudent",
    "ReadinessResult",
    "SkillRecommendation",
    "Skills",
    "StudentProfile",
]
