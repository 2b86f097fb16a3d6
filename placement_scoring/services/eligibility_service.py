"""
Eligibility Service

PURPOSE:
Decide whether a student may apply to a job, and grade *how well* the
student clears the job's bar.

HOW IT WORKS:
1. is_eligible(): four hard gates, AND-ed (CGPA, branch, backlogs, batch)
2. calculate_eligibility_score(): five additive components, 0-100
3. rank_*(): filter by the gate, attach the score, sort highest first

The score is computed independently of the gate so that advisory rankings
can still order candidates who fail it.

NOTE ON BACKLOGS:
The gate admits a student when backlogs are allowed OR backlogs <= max.
The score awards the backlog points only when (backlogs are allowed OR the
student has none) AND backlogs <= max. The two rules intentionally differ;
see DESIGN.md before changing either.
"""

from datetime import datetime, timezone
from typing import List, Optional, Sequence

from placement_scoring.core.logging import get_logger
from placement_scoring.schemas.schemas import (
    ALL_BRANCHES,
    SKILL_CATEGORIES,
    Academics,
    Eligibility,
    EligibilityResult,
    Job,
    JobStatus,
    PersonalInfo,
    RankedJob,
    RankedStudent,
    Skills,
    StudentProfile,
)
from placement_scoring.utils.concurrency import score_in_parallel
from placement_scoring.utils.numbers import round_half_up

logger = get_logger(__name__)

# Component maxima (sum to 100)
CGPA_POINTS = 30
BRANCH_POINTS = 25
BACKLOG_POINTS = 20
BATCH_POINTS = 15
SKILL_POINTS = 10


# ============================================================
# SAFE ACCESSORS
# Missing nested blocks degrade to empty defaults
# ============================================================

def _personal_info(student: StudentProfile) -> PersonalInfo:
    return student.personal_info or PersonalInfo()


def _academics(student: StudentProfile) -> Academics:
    return student.academics or Academics()


def _eligibility(job: Job) -> Eligibility:
    return job.eligibility or Eligibility()


def _branch_matches(branch: Optional[str], branches: Sequence[str]) -> bool:
    return branch in branches or ALL_BRANCHES in branches


def _student_skills_lower(student: StudentProfile) -> List[str]:
    """Union of the four scored skill categories, lowercased."""
    skills = student.skills or Skills()
    flattened = []
    for category in SKILL_CATEGORIES:
        flattened.extend(getattr(skills, category) or [])
    return [skill.lower() for skill in flattened]


# ============================================================
# ELIGIBILITY GATE
# ============================================================

def is_eligible(student: Optional[StudentProfile], job: Optional[Job]) -> bool:
    """
    Check if student passes every hard gate of the job.

    Gates (all must hold):
    - cgpa >= minimum CGPA
    - branch listed, or "ALL" listed
    - backlogs allowed, or backlogs <= max backlogs
    - batch listed
    """
    if student is None or job is None:
        return False

    info = _personal_info(student)
    academics = _academics(student)
    criteria = _eligibility(job)

    cgpa_ok = (academics.cgpa or 0) >= (criteria.minimum_cgpa or 0)
    branch_ok = _branch_matches(info.branch, criteria.branches or [])
    backlog_ok = bool(criteria.allow_backlogs) or \
        (academics.backlogs or 0) <= (criteria.max_backlogs or 0)
    batch_ok = info.batch in (criteria.batch or [])

    return cgpa_ok and branch_ok and backlog_ok and batch_ok


# ============================================================
# ELIGIBILITY SCORE
# ============================================================

def calculate_eligibility_score(student: Optional[StudentProfile], job: Optional[Job]) -> int:
    """
    Grade how well a student clears a job's criteria.

    Components:
    - CGPA (30): only when cgpa >= minimum; min(30, cgpa / 10 * 30)
    - Branch (25)
    - Backlogs (20)
    - Batch (15)
    - Skills (10): share of required skills found (case-insensitive
      substring) in the student's skills; full 10 when none are required

    Returns:
        Integer between 0 and 100
    """
    if student is None or job is None:
        return 0

    info = _personal_info(student)
    academics = _academics(student)
    criteria = _eligibility(job)

    score = 0.0

    cgpa = academics.cgpa or 0
    if cgpa >= (criteria.minimum_cgpa or 0):
        score += min(CGPA_POINTS, (cgpa / 10) * CGPA_POINTS)

    if _branch_matches(info.branch, criteria.branches or []):
        score += BRANCH_POINTS

    backlogs = academics.backlogs or 0
    if criteria.allow_backlogs or backlogs == 0:
        if backlogs <= (criteria.max_backlogs or 0):
            score += BACKLOG_POINTS

    if (info.batch or 0) in (criteria.batch or []):
        score += BATCH_POINTS

    required = [skill.lower() for skill in (criteria.required_skills or [])]
    if required:
        student_skills = _student_skills_lower(student)
        matched = [
            skill for skill in required
            if any(skill in student_skill for student_skill in student_skills)
        ]
        score += (len(matched) / len(required)) * SKILL_POINTS
    else:
        score += SKILL_POINTS  # Nothing required = full marks

    return round_half_up(score)


def evaluate_eligibility(student: Optional[StudentProfile], job: Optional[Job]) -> EligibilityResult:
    """Gate decision and graded score for one student-job pair."""
    result = EligibilityResult(
        eligible=is_eligible(student, job),
        score=calculate_eligibility_score(student, job)
    )
    logger.debug("Eligibility evaluated: eligible=%s score=%d", result.eligible, result.score)
    return result


# ============================================================
# RANKING
# ============================================================

def filter_open_jobs(jobs: Sequence[Job], now: Optional[datetime] = None) -> List[Job]:
    """
    Keep jobs that are accepting applications.

    A job is open when its status is active and its application deadline
    has not passed (a job without a deadline stays open).
    """
    now = now or datetime.now(timezone.utc)
    open_jobs = []
    for job in jobs:
        if job.status != JobStatus.active:
            continue
        deadline = job.application_deadline
        if deadline is not None:
            if deadline.tzinfo is None:
                deadline = deadline.replace(tzinfo=timezone.utc)
            if deadline < now:
                continue
        open_jobs.append(job)
    return open_jobs


def rank_eligible_jobs_for_student(
    student: StudentProfile,
    candidate_jobs: Sequence[Job]
) -> List[RankedJob]:
    """
    Jobs the student may apply to, best eligibility score first.

    Ties keep the order of candidate_jobs.
    """
    def _score(job: Job) -> Optional[RankedJob]:
        if not is_eligible(student, job):
            return None
        return RankedJob(job=job, eligibility_score=calculate_eligibility_score(student, job))

    ranked = [r for r in score_in_parallel(_score, candidate_jobs) if r is not None]
    ranked.sort(key=lambda r: r.eligibility_score, reverse=True)
    logger.info("Ranked %d of %d jobs as eligible", len(ranked), len(candidate_jobs))
    return ranked


def rank_eligible_students_for_job(
    job: Job,
    candidate_students: Sequence[StudentProfile]
) -> List[RankedStudent]:
    """
    Students who may apply to the job, best eligibility score first.

    Ties keep the order of candidate_students.
    """
    def _score(student: StudentProfile) -> Optional[RankedStudent]:
        if not is_eligible(student, job):
            return None
        return RankedStudent(student=student, eligibility_score=calculate_eligibility_score(student, job))

    ranked = [r for r in score_in_parallel(_score, candidate_students) if r is not None]
    ranked.sort(key=lambda r: r.eligibility_score, reverse=True)
    logger.info("Ranked %d of %d students as eligible", len(ranked), len(candidate_students))
    return ranked
