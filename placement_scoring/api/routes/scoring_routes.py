"""
Scoring Routes

POST /scoring/eligibility - Gate decision + graded eligibility score
POST /scoring/readiness - Placement Readiness Score with breakdown
POST /scoring/readiness/{user_id} - Compute PRS and store it on the profile
POST /scoring/match - Overall match score for a student-job pair
POST /scoring/match/{application_id} - Compute match and store it on the application
POST /scoring/rank/jobs - Eligible jobs for a student
POST /scoring/rank/students - Eligible students for a job
POST /scoring/rank/applicants - Applicants ordered by overall match
POST /scoring/skills/recommendations - Missing skills for a target role

Every body carries the full records; nothing is loaded from the database.
"""

from fastapi import APIRouter, HTTPException, Depends
from typing import List

from placement_scoring.services.eligibility_service import (
    evaluate_eligibility,
    filter_open_jobs,
    rank_eligible_jobs_for_student,
    rank_eligible_students_for_job,
)
from placement_scoring.services.readiness_service import compute_readiness
from placement_scoring.services.matching_service import get_match_ranker, get_skill_recommendations
from placement_scoring.services.mongo_service import (
    ApplicationService,
    StudentProfileService,
    get_application_service,
    get_student_profile_service,
)
from placement_scoring.schemas.schemas import (
    StudentProfile, StudentJobRequest, RankJobsRequest, RankStudentsRequest,
    SkillRecommendationRequest, EligibilityResult, ReadinessResult, MatchResult,
    RankedJob, RankedStudent, ApplicantMatch, SkillRecommendation
)

router = APIRouter(prefix="/scoring", tags=["Scoring"])


@router.post("/eligibility", response_model=EligibilityResult)
async def eligibility(data: StudentJobRequest):
    """Check the four eligibility gates and grade the student 0-100."""
    return evaluate_eligibility(data.student, data.job)


@router.post("/readiness", response_model=ReadinessResult)
async def readiness(student: StudentProfile):
    """Compute the Placement Readiness Score. Nothing is stored."""
    return compute_readiness(student)


@router.post("/readiness/{user_id}", response_model=ReadinessResult)
async def readiness_and_store(
    user_id: str,
    student: StudentProfile,
    profiles: StudentProfileService = Depends(get_student_profile_service)
):
    """
    Compute the PRS, then store it on the user's profile.

    The computation is the same as POST /readiness; storing is a separate step.
    """
    result = compute_readiness(student)
    if not profiles.update_readiness_score(user_id, result.score):
        raise HTTPException(status_code=404, detail="Student profile not found")
    return result


@router.post("/match", response_model=MatchResult)
async def match(data: StudentJobRequest):
    """
    Overall compatibility score.

    40% eligibility gate (100 or 0) + 35% skill match + 25% PRS.
    """
    return get_match_ranker().calculate_match(data.student, data.job)


@router.post("/match/{application_id}", response_model=MatchResult)
async def match_and_store(
    application_id: str,
    data: StudentJobRequest,
    applications: ApplicationService = Depends(get_application_service)
):
    """Compute the match score, then store it on the application."""
    result = get_match_ranker().calculate_match(data.student, data.job)
    if not applications.update_match_scores(application_id, result):
        raise HTTPException(status_code=404, detail="Application not found")
    return result


@router.post("/rank/jobs", response_model=List[RankedJob])
async def rank_jobs(data: RankJobsRequest):
    """Jobs the student is eligible for, best eligibility score first."""
    jobs = filter_open_jobs(data.jobs) if data.open_only else data.jobs
    return rank_eligible_jobs_for_student(data.student, jobs)


@router.post("/rank/students", response_model=List[RankedStudent])
async def rank_students(data: RankStudentsRequest):
    """Students eligible for the job, best eligibility score first."""
    return rank_eligible_students_for_job(data.job, data.students)


@router.post("/rank/applicants", response_model=List[ApplicantMatch])
async def rank_applicants(data: RankStudentsRequest):
    """All given students ordered by overall match score."""
    return get_match_ranker().rank_applicants_by_match(data.job, data.students)


@router.post("/skills/recommendations", response_model=SkillRecommendation)
async def skill_recommendations(data: SkillRecommendationRequest):
    """Skills the student is missing for a target role."""
    return get_skill_recommendations(data.skills, data.target_role)
