"""
Matching Service

PURPOSE:
Fold eligibility, skill overlap and readiness into one compatibility score
for a student-job pair, and rank jobs for a student or applicants for a job.

HOW IT WORKS:
1. Gate: is_eligible() gives a binary 100 / 0
2. Skill match: exact matches worth 70%, related matches 30% (0-100)
3. PRS: readiness of the student, independent of the job (0-100)
4. Overall = 40% eligibility + 35% skill match + 25% PRS

WHY A BINARY ELIGIBILITY HERE?
The graded eligibility score is for ordering candidates who all pass the
gate. In the overall score, eligibility only says whether the student may
apply at all.

FAIL-CLOSED:
calculate_match() never raises. Any failure is logged and the all-zero
result is returned, so a broken input can never rank a candidate highly.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel

from placement_scoring.core.logging import get_logger
from placement_scoring.schemas.schemas import (
    ApplicantMatch,
    Eligibility,
    Job,
    JobMatch,
    MatchBreakdown,
    MatchResult,
    SkillRecommendation,
    StudentProfile,
)
from placement_scoring.services.eligibility_service import is_eligible
from placement_scoring.services.readiness_service import compute_readiness
from placement_scoring.services.skill_taxonomy import DEFAULT_SKILL_TAXONOMY, SkillTaxonomy
from placement_scoring.utils.concurrency import score_in_parallel
from placement_scoring.utils.numbers import round_half_up

logger = get_logger(__name__)

# Returned when a job lists no required skills
NO_REQUIREMENTS_SKILL_SCORE = 85

EXACT_MATCH_WEIGHT = 70
RELATED_MATCH_WEIGHT = 30

ELIGIBILITY_WEIGHT = 0.4
SKILL_MATCH_WEIGHT = 0.35
PRS_WEIGHT = 0.25

SkillInput = Union[Sequence[str], Mapping[str, Sequence[str]], BaseModel, None]


# ============================================================
# SKILL MATCHING
# ============================================================

def normalize_skills(skills: SkillInput) -> List[str]:
    """
    Flatten skills into a clean list.

    Accepts a plain list, a Skills model, or a mapping of category -> list.
    Every entry is lowercased and trimmed; empty entries are dropped.
    """
    collected: List[str] = []

    if skills is None:
        return collected
    if isinstance(skills, BaseModel):
        skills = skills.model_dump()
    if isinstance(skills, Mapping):
        for value in skills.values():
            if isinstance(value, (list, tuple)):
                collected.extend(value)
    else:
        collected.extend(skills)

    normalized = (skill.lower().strip() for skill in collected)
    return [skill for skill in normalized if skill]


def calculate_skill_match_score(
    student_skills: SkillInput,
    job_required_skills: Optional[Sequence[str]],
    taxonomy: SkillTaxonomy = DEFAULT_SKILL_TAXONOMY
) -> int:
    """
    Score how well a student's skills cover a job's required skills.

    Each required skill is an exact match (equal to a student skill), else a
    related match (taxonomy.is_related), else no match. Exact matches never
    also count as related.

    Args:
        student_skills: List, Skills model or category mapping
        job_required_skills: Skills the job asks for
        taxonomy: Related-skill table

    Returns:
        Integer between 0 and 100 (85 when nothing is required)
    """
    if not job_required_skills:
        return NO_REQUIREMENTS_SKILL_SCORE

    student = normalize_skills(student_skills)
    required = normalize_skills(job_required_skills)

    # Only blank entries: treat as no requirements
    if not required:
        return NO_REQUIREMENTS_SKILL_SCORE

    exact = 0
    related = 0
    for job_skill in required:
        if job_skill in student:
            exact += 1
        elif any(taxonomy.is_related(s, job_skill) for s in student):
            related += 1

    score = (exact / len(required)) * EXACT_MATCH_WEIGHT + \
        (related / len(required)) * RELATED_MATCH_WEIGHT

    return min(100, round_half_up(score))


def calculate_overall_score(eligibility_score: float, skill_match_score: float, prs_score: float) -> int:
    """Weighted average: eligibility 40%, skills 35%, PRS 25%."""
    weighted = (eligibility_score * ELIGIBILITY_WEIGHT) + \
        (skill_match_score * SKILL_MATCH_WEIGHT) + \
        (prs_score * PRS_WEIGHT)
    return round_half_up(weighted)


# ============================================================
# SKILL RECOMMENDATIONS
# ============================================================

ROLE_SKILL_MAP: Dict[str, List[str]] = {
    "software_developer": [
        "JavaScript", "Python", "Java", "React", "Node.js",
        "SQL", "Git", "AWS", "Docker", "MongoDB"
    ],
    "data_scientist": [
        "Python", "R", "SQL", "Machine Learning", "Pandas",
        "NumPy", "Tableau", "TensorFlow", "Statistics"
    ],
    "frontend_developer": [
        "JavaScript", "React", "Vue.js", "HTML", "CSS",
        "TypeScript", "Webpack", "SASS", "Redux"
    ],
    "backend_developer": [
        "Node.js", "Python", "Java", "SQL", "MongoDB",
        "Express.js", "Spring Boot", "Docker", "AWS"
    ],
}
DEFAULT_ROLE = "software_developer"


def get_skill_recommendations(
    student_skills: SkillInput,
    target_role: str = DEFAULT_ROLE,
    taxonomy: SkillTaxonomy = DEFAULT_SKILL_TAXONOMY
) -> SkillRecommendation:
    """
    Compare a student's skills against what a target role usually asks for.

    Unknown roles fall back to software_developer.
    """
    role = target_role if target_role in ROLE_SKILL_MAP else DEFAULT_ROLE
    recommended = ROLE_SKILL_MAP[role]
    student = normalize_skills(student_skills)

    def _has(skill: str) -> bool:
        wanted = skill.lower()
        return any(wanted in s or taxonomy.is_related(s, wanted) for s in student)

    missing = [skill for skill in recommended if not _has(skill)]
    return SkillRecommendation(
        target_role=role,
        recommended=list(recommended),
        missing=missing,
        has_skills=[skill for skill in recommended if skill not in missing]
    )


# ============================================================
# MATCH RANKER
# ============================================================

def _coerce(model: type, value: Any) -> Any:
    if isinstance(value, dict):
        return model.model_validate(value)
    return value


class MatchRanker:
    """
    Computes overall match scores and ranks by them.

    Holds no state beyond its taxonomy; every call is a pure function of
    its arguments.
    """

    def __init__(self, taxonomy: SkillTaxonomy = DEFAULT_SKILL_TAXONOMY):
        self.taxonomy = taxonomy

    def calculate_match(self, student: Any, job: Any) -> MatchResult:
        """
        Full pipeline for one pair: gate, skill match, PRS, overall.

        Args:
            student: StudentProfile (or its dict form)
            job: Job (or its dict form)

        Returns:
            MatchResult; the all-zero result if anything goes wrong
        """
        try:
            student = _coerce(StudentProfile, student)
            job = _coerce(Job, job)
            if student is None or job is None:
                raise ValueError("student and job are both required")

            eligibility_score = 100 if is_eligible(student, job) else 0

            criteria = job.eligibility or Eligibility()
            skill_match_score = self.calculate_skill_match_score(
                student.skills,
                criteria.required_skills or []
            )

            prs_score = compute_readiness(student).score

            overall = calculate_overall_score(eligibility_score, skill_match_score, prs_score)
            return MatchResult(
                overall_score=overall,
                breakdown=MatchBreakdown(
                    eligibility=eligibility_score,
                    skill_match=skill_match_score,
                    prs=prs_score
                )
            )
        except Exception:
            logger.exception("Error calculating matching score")
            return MatchResult.zero()

    def calculate_skill_match_score(
        self,
        student_skills: SkillInput,
        job_required_skills: Optional[Sequence[str]]
    ) -> int:
        return calculate_skill_match_score(student_skills, job_required_skills, self.taxonomy)

    def rank_jobs_by_match(self, student: StudentProfile, jobs: Iterable[Job]) -> List[JobMatch]:
        """All jobs for one student, best overall score first (stable on ties)."""
        matches = score_in_parallel(
            lambda job: JobMatch(job=job, match=self.calculate_match(student, job)),
            jobs
        )
        matches.sort(key=lambda m: m.match.overall_score, reverse=True)
        return matches

    def rank_applicants_by_match(self, job: Job, students: Iterable[StudentProfile]) -> List[ApplicantMatch]:
        """All applicants for one job, best overall score first (stable on ties)."""
        matches = score_in_parallel(
            lambda student: ApplicantMatch(student=student, match=self.calculate_match(student, job)),
            students
        )
        matches.sort(key=lambda m: m.match.overall_score, reverse=True)
        return matches


# ============================================================
# CONVENIENCE FUNCTIONS
# ============================================================

_default_ranker = MatchRanker()


def get_match_ranker(taxonomy: Optional[SkillTaxonomy] = None) -> MatchRanker:
    """Get a ranker, sharing the default one unless a taxonomy is given."""
    if taxonomy is None:
        return _default_ranker
    return MatchRanker(taxonomy)


def calculate_match(student: Any, job: Any) -> MatchResult:
    """calculate_match() with the default taxonomy."""
    return _default_ranker.calculate_match(student, job)
