"""
Placement Scoring Engine
The eligibility and scoring core of a campus-placement portal.

Architecture:
- Eligibility: hard admission gate + graded 0-100 eligibility score
- Readiness: Placement Readiness Score (PRS) from the student profile alone
- Matching: skill overlap + eligibility + PRS folded into one ranking score
- MongoDB: only touched by the explicit persistence step, never by scorers
"""

__version__ = "1.0.0"
__author__ = "Student"
