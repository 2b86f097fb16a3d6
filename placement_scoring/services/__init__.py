"""
Services module - the scoring engine.

The three call shapes used by the rest of the portal:
- evaluate_eligibility(student, job) -> EligibilityResult
- compute_readiness(student) -> ReadinessResult
- calculate_match(student, job) -> MatchResult
"""

from placement_scoring.services.eligibility_service import (
    calculate_eligibility_score,
    evaluate_eligibility,
    filter_open_jobs,
    is_eligible,
    rank_eligible_jobs_for_student,
    rank_eligible_students_for_job,
)
from placement_scoring.services.readiness_service import compute_readiness
from placement_scoring.services.matching_service import (
    MatchRanker,
    calculate_match,
    calculate_overall_score,
    calculate_skill_match_score,
    get_match_ranker,
    get_skill_recommendations,
)
from placement_scoring.services.skill_taxonomy import DEFAULT_SKILL_TAXONOMY, SkillTaxonomy

__all__ = [
    "DEFAULT_SKILL_TAXONOMY",
    "MatchRanker",
    "SkillTaxonomy",
    "calculate_eligibility_score",
    "calculate_match",
    "calculate_overall_score",
    "calculate_skill_match_score",
    "compute_readiness",
    "evaluate_eligibility",
    "filter_open_jobs",
    "get_match_ranker",
    "get_skill_recommendations",
    "is_eligible",
    "rank_eligible_jobs_for_student",
    "rank_eligible_students_for_job",
]
