"""Human-readable rationale for a match score."""

from typing import List, Sequence

from .config import EXPLANATION_TIERS, EXPLANATION_LIST_LIMIT


def tier_prefix(overall_score: float) -> str:
    for min_score, prefix in EXPLANATION_TIERS:
        if overall_score >= min_score:
            return prefix
    return EXPLANATION_TIERS[-1][1]


def _summarize(items: Sequence[str]) -> str:
    shown = ", ".join(items[:EXPLANATION_LIST_LIMIT])
    if len(items) > EXPLANATION_LIST_LIMIT:
        shown += f" and {len(items) - EXPLANATION_LIST_LIMIT} more"
    return shown


def explain(overall_score: float, matching_skills: List[str], missing_skills: List[str]) -> str:
    """
    Build the explanation string for a match.

    Example:
        >>> explain(65, ["React", "Node.js"], ["AWS"])
        'Good match. You have 2 matching skills: React, Node.js. Consider developing: AWS.'
    """
    explanation = tier_prefix(overall_score)

    if matching_skills:
        noun = "skill" if len(matching_skills) == 1 else "skills"
        explanation += f"You have {len(matching_skills)} matching {noun}: {_summarize(matching_skills)}. "

    if missing_skills:
        explanation += f"Consider developing: {_summarize(missing_skills)}."

    return explanation.strip()
