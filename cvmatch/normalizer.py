"""
Skill Normalizer

Single equality primitive for every skill comparison in the engine.
Matching is deliberately loose: substring containment means short tokens
such as "c" match inside "c++". Tightening it would change scores and break
comparability with previously computed results.
"""

import logging
from typing import Iterable, List, Tuple

from .config import SKILL_ALIASES

logger = logging.getLogger(__name__)


def skills_equivalent(a: str, b: str) -> bool:
    """
    Decide whether two skill tokens refer to the same skill.

    Rules, first match wins:
    1. Case-insensitive equality
    2. Case-insensitive substring containment, either direction
    3. Alias table: one side is the canonical name, the other a variant

    Blank tokens are never equivalent to anything.
    """
    s1 = (a or "").strip().lower()
    s2 = (b or "").strip().lower()
    if not s1 or not s2:
        return False

    if s1 == s2:
        return True

    if s1 in s2 or s2 in s1:
        return True

    for canonical, variants in SKILL_ALIASES.items():
        if (s1 == canonical and s2 in variants) or (s2 == canonical and s1 in variants):
            return True

    return False


def dedupe(items: Iterable[str]) -> List[str]:
    """Drop blanks and case-insensitive duplicates, keeping first spelling and order."""
    seen = set()
    result = []
    for item in items or []:
        key = (item or "").strip().lower()
        if not key or key in seen:
            continue
        seen.add(key)
        result.append(item.strip())
    return result


def partition_skills(candidate_skills: Iterable[str], job_skills: Iterable[str]) -> Tuple[List[str], List[str]]:
    """
    Split the job's skills into (matching, missing).

    A job skill is matching when at least one candidate skill is equivalent
    to it. Both lists keep job order and only contain job skills.
    """
    candidate = dedupe(candidate_skills)
    matching, missing = [], []
    for job_skill in dedupe(job_skills):
        if any(skills_equivalent(c, job_skill) for c in candidate):
            matching.append(job_skill)
        else:
            missing.append(job_skill)

    logger.debug(f"Skill partition: {len(matching)} matching, {len(missing)} missing")
    return matching, missing


def find_matching_skills(candidate_skills: Iterable[str], job_skills: Iterable[str]) -> List[str]:
    return partition_skills(candidate_skills, job_skills)[0]


def find_missing_skills(candidate_skills: Iterable[str], job_skills: Iterable[str]) -> List[str]:
    return partition_skills(candidate_skills, job_skills)[1]
