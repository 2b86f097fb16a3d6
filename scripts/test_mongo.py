#!/usr/bin/env python3
"""
MongoDB Persistence Test Script

The scorers never write; these services do, after the caller has computed.
Collections are replaced by mocks so no server is needed.

Run: pytest scripts/test_mongo.py
"""
from unittest import mock

from bson import ObjectId

from placement_scoring.schemas.schemas import MatchBreakdown, MatchResult
from placement_scoring.services.mongo_service import (
    ApplicationService,
    StudentProfileService,
    as_object_id,
)
from placement_scoring.services.readiness_service import compute_readiness

from sample_data import make_complete_student


def _collection(matched=1):
    collection = mock.MagicMock()
    collection.update_one.return_value = mock.MagicMock(matched_count=matched, modified_count=matched)
    return collection


def test_as_object_id():
    hex_id = "65f1c0ffee0000000000beef"
    assert as_object_id(hex_id) == ObjectId(hex_id)
    assert as_object_id("student-42") == "student-42"
    assert as_object_id(42) == 42


def test_update_readiness_score():
    collection = _collection()
    service = StudentProfileService(collection)
    student = make_complete_student()

    score = compute_readiness(student).score
    assert service.update_readiness_score(student.user_id, score) is True

    query, update = collection.update_one.call_args[0]
    assert query == {"userId": ObjectId(student.user_id)}
    assert update["$set"]["placementReadinessScore"] == 67
    assert "updatedAt" in update["$set"]


def test_update_readiness_score_no_profile():
    service = StudentProfileService(_collection(matched=0))
    assert service.update_readiness_score("65f1c0ffee0000000000dead", 50) is False


def test_update_match_scores():
    collection = _collection()
    service = ApplicationService(collection)
    match = MatchResult(overall_score=71, breakdown=MatchBreakdown(eligibility=100, skill_match=70, prs=27))

    assert service.update_match_scores("65f1c0ffee0000000000f00d", match) is True

    query, update = collection.update_one.call_args[0]
    assert query == {"_id": ObjectId("65f1c0ffee0000000000f00d")}
    fields = update["$set"]
    assert fields["overallScore"] == 71
    assert fields["eligibilityScore"] == 100
    assert fields["skillMatchScore"] == 70
    assert fields["prsScore"] == 27


def test_computing_does_not_touch_storage():
    collection = _collection()
    StudentProfileService(collection)

    compute_readiness(make_complete_student())

    collection.update_one.assert_not_called()
