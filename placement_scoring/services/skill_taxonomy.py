"""
Skill Taxonomy - related-skill table used for partial skill matches.

A taxonomy maps a canonical skill to the terms that count as related to it
("python" -> django, flask, ...). Instances are immutable; extended() returns
a new taxonomy, so a caller can pass its own table to the matching functions
without touching the default one.
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional


class SkillTaxonomy:
    """Immutable canonical-skill -> related-terms table."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping[str, Iterable[str]]] = None):
        normalized: Dict[str, FrozenSet[str]] = {}
        for canonical, related in (entries or {}).items():
            key = canonical.lower().strip()
            if not key:
                continue
            terms = frozenset(t.lower().strip() for t in related if t and t.strip())
            normalized[key] = normalized.get(key, frozenset()) | terms
        self._entries = MappingProxyType(normalized)

    @property
    def entries(self) -> Mapping[str, FrozenSet[str]]:
        return self._entries

    def extended(self, entries: Mapping[str, Iterable[str]]) -> "SkillTaxonomy":
        """
        Return a new taxonomy with entries merged in.

        Related terms for an existing canonical skill are added to, not replaced.
        """
        merged: Dict[str, Iterable[str]] = {k: set(v) for k, v in self._entries.items()}
        for canonical, related in entries.items():
            key = canonical.lower().strip()
            if not key:
                continue
            merged[key] = set(merged.get(key, set())) | {t.lower().strip() for t in related if t and t.strip()}
        return SkillTaxonomy(merged)

    def is_related(self, skill_a: str, skill_b: str) -> bool:
        """
        Check if two normalized skills are related.

        Related when one contains a canonical skill and the other contains
        one of its related terms, or when either contains the other.
        """
        for canonical, related in self._entries.items():
            if canonical in skill_a and any(term in skill_b for term in related):
                return True
            if canonical in skill_b and any(term in skill_a for term in related):
                return True

        return skill_a in skill_b or skill_b in skill_a

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SkillTaxonomy({len(self._entries)} entries)"


DEFAULT_SKILL_TAXONOMY = SkillTaxonomy({
    "javascript": ["js", "node", "nodejs", "react", "vue", "angular"],
    "python": ["django", "flask", "fastapi", "pandas", "numpy"],
    "java": ["spring", "springboot", "hibernate", "maven"],
    "react": ["reactjs", "jsx", "redux", "nextjs"],
    "node": ["nodejs", "express", "expressjs"],
    "mongodb": ["mongo", "mongoose"],
    "mysql": ["sql", "database"],
    "aws": ["amazon web services", "ec2", "s3", "lambda"],
    "docker": ["containerization", "kubernetes"],
    "git": ["github", "version control"],
})
