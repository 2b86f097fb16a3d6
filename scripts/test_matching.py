#!/usr/bin/env python3
"""
Matching Test Script

Tests:
1. Skill normalization and skill match score (exact / related / none)
2. Related-skill taxonomy and injecting a custom one
3. Overall score weighting and monotonicity
4. Full match pipeline, including the fail-closed result
5. Ranking by overall score, inline and through the thread pool

Run: pytest scripts/test_matching.py
"""
import logging
from datetime import datetime

import pytest
from bson import ObjectId

from placement_scoring.core.config import get_settings
from placement_scoring.schemas.schemas import Job, MatchResult, Skills, StudentProfile
from placement_scoring.services.matching_service import (
    MatchRanker,
    calculate_match,
    calculate_overall_score,
    calculate_skill_match_score,
    get_match_ranker,
    get_skill_recommendations,
    normalize_skills,
)
from placement_scoring.services.readiness_service import calculate_prs
from placement_scoring.services.skill_taxonomy import DEFAULT_SKILL_TAXONOMY, SkillTaxonomy
from placement_scoring.utils.concurrency import score_in_parallel

from sample_data import make_complete_student, make_job, make_student


# ============================================================
# SKILL MATCHING
# ============================================================

def test_normalize_skills():
    assert normalize_skills(["  Python ", "", "   ", "REACT"]) == ["python", "react"]
    assert normalize_skills({"programming": ["Go"], "tools": ["Git "], "notes": "ignored"}) == ["go", "git"]
    assert normalize_skills(Skills(programming=["Java"], databases=["MySQL"])) == ["java", "mysql"]
    assert normalize_skills(None) == []


def test_no_required_skills_returns_85():
    """Pinned: 85 here, while the eligibility score gives full skill points."""
    assert calculate_skill_match_score(["Python"], []) == 85
    assert calculate_skill_match_score(["Python"], None) == 85
    assert calculate_skill_match_score([], []) == 85


def test_blank_required_skills_treated_as_none():
    assert calculate_skill_match_score(["Python"], ["", "   "]) == 85


def test_exact_matches_cap_at_seventy():
    assert calculate_skill_match_score(["  PyThOn "], ["python"]) == 70
    assert calculate_skill_match_score(["Python", "SQL"], ["sql", "PYTHON"]) == 70


def test_partial_exact_match():
    score = calculate_skill_match_score(["Python", "Django", "React"], ["python", "react", "java"])
    # 2/3 * 70
    assert score == 47


def test_related_match_through_taxonomy():
    assert calculate_skill_match_score(["Django"], ["Python"]) == 30
    assert calculate_skill_match_score(["Python"], ["Django"]) == 30
    assert calculate_skill_match_score(["Kubernetes"], ["Docker"]) == 30


def test_exact_takes_precedence_over_related():
    # "python" is exact; "python3" would also be related but must not add to it
    assert calculate_skill_match_score(["python", "python3"], ["python"]) == 70


def test_mixed_exact_related_and_missing():
    score = calculate_skill_match_score(["React", "Express"], ["react", "node", "rust", "go"])
    # exact: react; related: node (express); missing: rust, go
    # 1/4 * 70 + 1/4 * 30 = 25
    assert score == 25


def test_adversarial_substrings():
    # "java" sits inside "javascript": counted as related
    assert calculate_skill_match_score(["Java"], ["JavaScript"]) == 30
    # A one-letter skill sits inside unrelated words
    assert calculate_skill_match_score(["C"], ["React"]) == 30
    # Whitespace-only student skills are dropped
    assert calculate_skill_match_score(["   ", ""], ["python"]) == 0
    assert calculate_skill_match_score([], ["python"]) == 0


def test_student_skills_object():
    student = make_student(skills=Skills(programming=["Python"], databases=["MongoDB"]))
    assert calculate_skill_match_score(student.skills, ["mongodb", "python"]) == 70


# ============================================================
# TAXONOMY
# ============================================================

def test_taxonomy_is_immutable():
    with pytest.raises(TypeError):
        DEFAULT_SKILL_TAXONOMY.entries["rust"] = frozenset({"cargo"})
    assert "rust" not in DEFAULT_SKILL_TAXONOMY.entries


def test_taxonomy_extended_returns_new_table():
    extended = DEFAULT_SKILL_TAXONOMY.extended({"Kotlin": ["Android", "Jetpack"], "python": ["pytorch"]})

    assert "kotlin" in extended.entries
    assert "kotlin" not in DEFAULT_SKILL_TAXONOMY.entries
    assert "pytorch" in extended.entries["python"]
    assert "django" in extended.entries["python"]
    assert len(extended) == len(DEFAULT_SKILL_TAXONOMY) + 1


def test_taxonomy_extended_skips_blank_terms():
    extended = DEFAULT_SKILL_TAXONOMY.extended({"Rust": ["Cargo", "", "   ", None], "  ": ["ignored"]})

    assert extended.entries["rust"] == frozenset({"cargo"})
    assert "" not in extended.entries
    assert len(extended) == len(DEFAULT_SKILL_TAXONOMY) + 1


def test_injected_taxonomy_changes_related_matches():
    assert calculate_skill_match_score(["Android"], ["Kotlin"]) == 0

    taxonomy = SkillTaxonomy({"kotlin": ["android"]})
    assert calculate_skill_match_score(["Android"], ["Kotlin"], taxonomy) == 30

    ranker = MatchRanker(taxonomy)
    assert ranker.calculate_skill_match_score(["Android"], ["Kotlin"]) == 30
    assert get_match_ranker(taxonomy).taxonomy is taxonomy
    assert get_match_ranker().taxonomy is DEFAULT_SKILL_TAXONOMY


# ============================================================
# OVERALL SCORE
# ============================================================

def test_overall_score_weights():
    assert calculate_overall_score(0, 0, 0) == 0
    assert calculate_overall_score(100, 100, 100) == 100
    assert calculate_overall_score(100, 0, 0) == 40
    assert calculate_overall_score(0, 100, 0) == 35
    assert calculate_overall_score(0, 0, 100) == 25
    # 40 + 24.5 + 16.75
    assert calculate_overall_score(100, 70, 67) == 81


def test_overall_score_monotonic_in_each_input():
    values = range(0, 101, 5)
    for fixed_a in (0, 50, 100):
        for fixed_b in (0, 33, 85):
            for arrangement in range(3):
                previous = -1
                for v in values:
                    args = [fixed_a, fixed_b]
                    args.insert(arrangement, v)
                    score = calculate_overall_score(*args)
                    assert score >= previous
                    previous = score


# ============================================================
# FULL PIPELINE
# ============================================================

def test_calculate_match_scenario_a():
    result = calculate_match(make_student(), make_job())

    assert result.breakdown.eligibility == 100
    assert result.breakdown.skill_match == 70
    assert result.breakdown.prs == 27
    # 40 + 24.5 + 6.75
    assert result.overall_score == 71


def test_calculate_match_ineligible_uses_zero_eligibility():
    result = calculate_match(make_student(), make_job(batch=(2022,)))

    assert result.breakdown.eligibility == 0
    assert result.breakdown.skill_match == 70
    assert result.overall_score == calculate_overall_score(0, 70, result.breakdown.prs)


def test_calculate_match_prs_matches_readiness():
    student = make_complete_student()
    result = calculate_match(student, make_job(required_skills=()))

    assert result.breakdown.prs == calculate_prs(student)
    assert result.breakdown.skill_match == 85


def test_calculate_match_accepts_dicts():
    result = calculate_match(
        {"personalInfo": {"branch": "CSE", "batch": 2021}, "academics": {"cgpa": 8.5},
         "skills": {"programming": ["React"]}},
        {"eligibility": {"branches": ["CSE"], "minimumCGPA": 7, "batch": [2021], "requiredSkills": ["React"]}}
    )
    assert result.overall_score == 71


def _stored_student(cgpa=8.5):
    """A student profile as it comes back from the studentprofiles collection."""
    return {
        "_id": ObjectId(),
        "userId": ObjectId("65f1c0ffee0000000000beef"),
        "personalInfo": {"branch": "CSE", "batch": 2021},
        "academics": {"cgpa": cgpa},
        "skills": {"programming": ["React"]},
        "createdAt": datetime(2024, 1, 15),
        "__v": 0,
    }


def _stored_job(title="stored"):
    return {
        "_id": ObjectId(),
        "companyId": ObjectId(),
        "title": title,
        "status": "active",
        "eligibility": {
            "branches": ["CSE", "IT"], "minimumCGPA": 7.0, "allowBacklogs": False,
            "maxBacklogs": 0, "batch": [2021], "requiredSkills": ["React"]
        },
        "createdAt": datetime(2024, 1, 10),
    }


def test_calculate_match_accepts_stored_documents():
    result = calculate_match(_stored_student(), _stored_job())

    assert result.overall_score == 71
    assert result.breakdown.eligibility == 100
    assert result.breakdown.skill_match == 70
    assert result.breakdown.prs == 27


def test_stored_document_ids_become_hex_strings():
    job = Job.model_validate(_stored_job())
    student = StudentProfile.model_validate(_stored_student())

    assert isinstance(job.id, str) and len(job.id) == 24
    assert isinstance(job.company_id, str)
    assert student.user_id == "65f1c0ffee0000000000beef"


def test_rank_by_match_with_stored_documents():
    ranker = get_match_ranker()

    applicants = ranker.rank_applicants_by_match(
        _stored_job(),
        [_stored_student(cgpa=7.2), _stored_student(cgpa=9.6)]
    )
    assert [m.match.breakdown.eligibility for m in applicants] == [100, 100]
    assert [m.student.academics.cgpa for m in applicants] == [9.6, 7.2]
    assert all(m.match.overall_score > 0 for m in applicants)

    jobs = ranker.rank_jobs_by_match(_stored_student(), [_stored_job("one"), _stored_job("two")])
    assert [m.match.overall_score for m in jobs] == [71, 71]


def test_calculate_match_fail_closed(caplog):
    zero = MatchResult.zero()

    with caplog.at_level(logging.ERROR):
        assert calculate_match(make_student(), None) == zero
        assert calculate_match(None, make_job()) == zero
        # Malformed job document
        assert calculate_match(make_student(), {"eligibility": {"minimumCGPA": "high"}}) == zero
        assert calculate_match(make_student(), "not a job") == zero

    assert "Error calculating matching score" in caplog.text


def test_calculate_match_internal_failure_is_zero():
    # Bypasses validation: a skill that is not a string
    student = make_student()
    student.skills = Skills.model_construct(programming=[None], technical=[], frameworks=[], tools=[], databases=[])

    result = calculate_match(student, make_job())

    assert result.overall_score == 0
    assert result.breakdown.eligibility == 0
    assert result.breakdown.skill_match == 0
    assert result.breakdown.prs == 0


def test_calculate_match_is_idempotent():
    student, job = make_complete_student(), make_job(required_skills=("Python", "Flask"))
    assert calculate_match(student, job) == calculate_match(student, job)


# ============================================================
# RANKING
# ============================================================

def _applicants():
    return [
        make_student(cgpa=7.5, first_name="tie one"),
        make_student(cgpa=9.0, first_name="strong", skills=Skills(programming=["React", "Redux"], tools=["Git"])),
        make_student(cgpa=8.0, batch=2022, first_name="wrong batch"),
        make_student(cgpa=7.5, first_name="tie two"),
    ]


def test_rank_applicants_by_match():
    ranked = get_match_ranker().rank_applicants_by_match(make_job(), _applicants())
    names = [m.student.personal_info.first_name for m in ranked]

    assert names == ["strong", "tie one", "tie two", "wrong batch"]
    scores = [m.match.overall_score for m in ranked]
    assert scores == sorted(scores, reverse=True)


def test_rank_jobs_by_match():
    student = make_student()
    jobs = [
        make_job(title="other batch", batch=(2022,)),
        make_job(title="react", required_skills=("React",)),
        make_job(title="open", required_skills=()),
    ]
    ranked = get_match_ranker().rank_jobs_by_match(student, jobs)

    assert [m.job.title for m in ranked] == ["open", "react", "other batch"]


def test_parallel_ranking_matches_inline(monkeypatch):
    job = make_job()
    students = _applicants() * 10

    inline = get_match_ranker().rank_applicants_by_match(job, students)

    settings = get_settings()
    monkeypatch.setattr(settings, "scoring_parallel_threshold", 1)
    monkeypatch.setattr(settings, "scoring_max_workers", 4)
    pooled = get_match_ranker().rank_applicants_by_match(job, students)

    assert [m.student.personal_info.first_name for m in pooled] == \
        [m.student.personal_info.first_name for m in inline]
    assert [m.match for m in pooled] == [m.match for m in inline]


def test_score_in_parallel_keeps_order():
    items = list(range(50))
    assert score_in_parallel(lambda x: x * 2, items, max_workers=8, threshold=1) == [x * 2 for x in items]
    assert score_in_parallel(lambda x: x * 2, items, threshold=1000) == [x * 2 for x in items]
    assert score_in_parallel(lambda x: x, []) == []


# ============================================================
# SKILL RECOMMENDATIONS
# ============================================================

def test_skill_recommendations():
    rec = get_skill_recommendations(["Python", "React", "Git"], "frontend_developer")

    assert rec.target_role == "frontend_developer"
    assert "React" in rec.has_skills
    assert "Redux" in rec.has_skills  # related to React
    assert "TypeScript" in rec.missing
    assert set(rec.has_skills) | set(rec.missing) == set(rec.recommended)


def test_skill_recommendations_unknown_role():
    rec = get_skill_recommendations([], "astronaut")
    assert rec.target_role == "software_developer"
    assert rec.missing == rec.recommended
    assert rec.has_skills == []
