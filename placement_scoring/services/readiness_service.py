"""
Readiness Service - Placement Readiness Score (PRS)

PURPOSE:
Summarize how prepared a student is for placements, independent of any job.

HOW IT WORKS:
PRS = 0.4 * Academic + 0.3 * Skills + 0.2 * Experience + 0.1 * Completeness

Each category is scored 0-100 and ships with a feedback string for the
dashboard. Feedback tiers: >= 80, >= 60, below.

This module only computes. Storing the score on the profile is a separate
step owned by the caller (see StudentProfileService.update_readiness_score).
"""

from typing import Dict, Optional, Tuple

from placement_scoring.core.logging import get_logger
from placement_scoring.schemas.schemas import (
    SKILL_CATEGORIES,
    CategoryScore,
    ReadinessResult,
    StudentProfile,
)
from placement_scoring.utils.numbers import clamp, round_half_up

logger = get_logger(__name__)

# Category weights (sum to 1.0)
ACADEMIC_WEIGHT = 0.4
SKILLS_WEIGHT = 0.3
EXPERIENCE_WEIGHT = 0.2
COMPLETENESS_WEIGHT = 0.1

BACKLOG_PENALTY = 5

# Feedback tier boundaries
EXCELLENT_THRESHOLD = 80
GOOD_THRESHOLD = 60

# (excellent, good, needs improvement)
FEEDBACK: Dict[str, Tuple[str, str, str]] = {
    "academics": (
        "Excellent academic performance",
        "Good academic performance",
        "Needs improvement in academics",
    ),
    "skills": (
        "Strong technical skills",
        "Good technical skills",
        "Add more technical skills",
    ),
    "experience": (
        "Great project experience",
        "Good project experience",
        "Add more projects",
    ),
    "completeness": (
        "Profile is complete",
        "Profile is almost complete",
        "Complete your profile",
    ),
}

PERSONAL_FIELDS = ("first_name", "last_name", "phone", "roll_number", "branch", "batch")
ACADEMIC_FIELDS = ("cgpa", "tenth_marks", "twelfth_marks")


# ============================================================
# CATEGORY SCORES
# ============================================================

def calculate_academic_score(student: StudentProfile) -> float:
    """
    CGPA counts 60%, 10th and 12th marks 20% each; every backlog costs 5.

    Returns:
        Float between 0 and 100
    """
    academics = student.academics
    if academics is None:
        return 0.0

    score = 0.0
    if academics.cgpa:
        score += (academics.cgpa / 10) * 60
    if academics.tenth_marks:
        score += (academics.tenth_marks / 100) * 20
    if academics.twelfth_marks:
        score += (academics.twelfth_marks / 100) * 20
    if academics.backlogs and academics.backlogs > 0:
        score -= academics.backlogs * BACKLOG_PENALTY

    return clamp(score)


def calculate_skills_score(student: StudentProfile) -> float:
    """5 points per skill (max 80) plus 5 per non-empty category."""
    skills = student.skills
    if skills is None:
        return 0.0

    lists = [getattr(skills, category) or [] for category in SKILL_CATEGORIES]
    total_skills = sum(len(items) for items in lists)
    filled_categories = sum(1 for items in lists if items)

    score = min(total_skills * 5, 80) + filled_categories * 5
    return float(min(100, score))


def calculate_experience_score(student: StudentProfile) -> float:
    """Projects worth up to 70, work experience up to 30, 15 points each."""
    score = 0
    projects = student.projects or []
    experience = student.experience or []

    if projects:
        score += min(len(projects) * 15, 70)
    if experience:
        score += min(len(experience) * 15, 30)

    return float(min(100, score))


def calculate_completeness_score(student: StudentProfile) -> float:
    """Share of the 10-item profile checklist that is filled in."""
    completed = 0
    total = 0

    for field in PERSONAL_FIELDS:
        total += 1
        if student.personal_info and getattr(student.personal_info, field):
            completed += 1

    for field in ACADEMIC_FIELDS:
        total += 1
        if student.academics and getattr(student.academics, field):
            completed += 1

    # At least one skill in any category
    total += 1
    if student.skills and any(getattr(student.skills, c) for c in SKILL_CATEGORIES):
        completed += 1

    return (completed / total) * 100 if total else 0.0


def feedback_for(category: str, score: float) -> str:
    """Pick the feedback string for a category score."""
    excellent, good, weak = FEEDBACK[category]
    if score >= EXCELLENT_THRESHOLD:
        return excellent
    if score >= GOOD_THRESHOLD:
        return good
    return weak


# ============================================================
# PRS
# ============================================================

def compute_readiness(student: Optional[StudentProfile]) -> ReadinessResult:
    """
    Compute the Placement Readiness Score with its category breakdown.

    Args:
        student: Profile to score (None scores 0 with an empty breakdown)

    Returns:
        ReadinessResult(score, breakdown)
    """
    if student is None:
        return ReadinessResult(score=0, breakdown={})

    categories = (
        ("academics", calculate_academic_score(student), ACADEMIC_WEIGHT),
        ("skills", calculate_skills_score(student), SKILLS_WEIGHT),
        ("experience", calculate_experience_score(student), EXPERIENCE_WEIGHT),
        ("completeness", calculate_completeness_score(student), COMPLETENESS_WEIGHT),
    )

    total = 0.0
    breakdown = {}
    for name, score, weight in categories:
        total += score * weight
        shown = round_half_up(score)
        # Tier follows the reported score
        breakdown[name] = CategoryScore(
            score=shown,
            max_score=100,
            feedback=feedback_for(name, shown)
        )

    result = ReadinessResult(score=round_half_up(total), breakdown=breakdown)
    logger.debug("PRS computed for %s: %d", student.user_id or "<unsaved>", result.score)
    return result


def calculate_prs(student: Optional[StudentProfile]) -> int:
    """Just the PRS number."""
    return compute_readiness(student).score
