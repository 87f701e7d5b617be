"""
Deterministic Scoring Engine

All scoring functions are deterministic - same inputs produce same outputs.
Every scorer is total: empty inputs fall back to a neutral or floor value
and results are clamped to 0-100.
"""

import math
import logging
from typing import Dict, Iterable, List, Optional

from .config import (
    NEUTRAL_SCORE, EXPERIENCE_TEXT_FLOOR, EDUCATION_TEXT_FLOOR, EMPTY_KEYWORDS_SCORE,
    EXPERIENCE_YEAR_BANDS, EXPERIENCE_DEFAULT_SCORE,
    EDUCATION_PRESENT_SCORE, EDUCATION_ABSENT_SCORE,
)
from .normalizer import dedupe, find_matching_skills

logger = logging.getLogger(__name__)


def clamp_score(value: float) -> float:
    """Clamp a score into 0-100. NaN is treated as 0."""
    if value is None or math.isnan(value):
        return 0.0
    return float(max(0.0, min(100.0, value)))


def round_score(value: float) -> int:
    """Round half-up (not banker's rounding) and clamp to an int in 0-100."""
    return int(math.floor(clamp_score(value) + 0.5))


def _ratio(matches: int, total: int) -> float:
    return clamp_score(matches / total * 100)


def _count_found(snippets: List[str], text: str) -> int:
    text_lower = text.lower()
    return sum(1 for s in snippets if s.lower() in text_lower)


def calculate_skills_score(
    candidate_skills: Iterable[str],
    job_skills: Iterable[str]
) -> float:
    """
    Calculate skills match score (0-100).

    Formula: (job skills with an equivalent candidate skill / total job skills) * 100.
    Each job skill counts once however many candidate skills satisfy it.

    Returns:
        Score from 0-100, or the neutral 50 when the job lists no skills
    """
    job_set = dedupe(job_skills)
    if not job_set:
        logger.debug(f"No job skills specified, score = {NEUTRAL_SCORE}")
        return float(NEUTRAL_SCORE)

    matching = find_matching_skills(candidate_skills, job_set)
    score = _ratio(len(matching), len(job_set))
    logger.debug(f"Skills: {len(matching)}/{len(job_set)} = {score:.2f}%")
    return score


def calculate_keyword_presence_score(
    candidate_keywords: Iterable[str],
    job_description: str,
    job_requirements: Iterable[str]
) -> float:
    """
    Share of candidate keywords that occur in the job description or requirements.

    A candidate with no keywords scores 0: an empty profile is a real signal.
    """
    keywords = dedupe(candidate_keywords)
    if not keywords:
        logger.debug(f"No candidate keywords, score = {EMPTY_KEYWORDS_SCORE}")
        return float(EMPTY_KEYWORDS_SCORE)

    job_text = (job_description or "") + " " + " ".join(job_requirements or [])
    found = _count_found(keywords, job_text)
    score = _ratio(found, len(keywords))
    logger.debug(f"Keywords (presence): {found}/{len(keywords)} = {score:.2f}%")
    return score


def calculate_keyword_overlap_score(
    candidate_keywords: Iterable[str],
    job_keywords: Iterable[str]
) -> float:
    """
    Share of job keywords that contain at least one candidate keyword.

    Neutral 50 when the job has no keywords.
    """
    job_set = dedupe(job_keywords)
    if not job_set:
        logger.debug(f"No job keywords, score = {NEUTRAL_SCORE}")
        return float(NEUTRAL_SCORE)

    candidate = [k.lower() for k in dedupe(candidate_keywords)]
    found = sum(1 for jk in job_set if any(ck in jk.lower() for ck in candidate))
    score = _ratio(found, len(job_set))
    logger.debug(f"Keywords (overlap): {found}/{len(job_set)} = {score:.2f}%")
    return score


def calculate_years_experience_score(years_experience: Optional[float]) -> float:
    """Band years of experience: >=5 -> 90, >=3 -> 75, >=1 -> 60, else 50."""
    if years_experience is None or math.isnan(years_experience):
        return float(EXPERIENCE_DEFAULT_SCORE)

    for min_years, score in EXPERIENCE_YEAR_BANDS:
        if years_experience >= min_years:
            logger.debug(f"Experience: {years_experience} >= {min_years} years, score = {score}")
            return float(score)

    logger.debug(f"Experience: {years_experience} years, score = {EXPERIENCE_DEFAULT_SCORE}")
    return float(EXPERIENCE_DEFAULT_SCORE)


def calculate_experience_text_score(
    candidate_experience: Iterable[str],
    job_description: str
) -> float:
    """Share of experience snippets found in the job description, floor 30 when none."""
    snippets = dedupe(candidate_experience)
    if not snippets:
        logger.debug(f"No experience entries, score = {EXPERIENCE_TEXT_FLOOR}")
        return float(EXPERIENCE_TEXT_FLOOR)

    found = _count_found(snippets, job_description or "")
    score = _ratio(found, len(snippets))
    logger.debug(f"Experience (text): {found}/{len(snippets)} = {score:.2f}%")
    return score


def calculate_education_binary_score(candidate_education: Iterable[str]) -> float:
    if dedupe(candidate_education):
        return float(EDUCATION_PRESENT_SCORE)
    return float(EDUCATION_ABSENT_SCORE)


def calculate_education_text_score(
    candidate_education: Iterable[str],
    job_requirements: Iterable[str]
) -> float:
    """Share of education entries found in the job requirements, floor 40 when none."""
    entries = dedupe(candidate_education)
    if not entries:
        logger.debug(f"No education entries, score = {EDUCATION_TEXT_FLOOR}")
        return float(EDUCATION_TEXT_FLOOR)

    found = _count_found(entries, " ".join(job_requirements or []))
    score = _ratio(found, len(entries))
    logger.debug(f"Education (text): {found}/{len(entries)} = {score:.2f}%")
    return score


def calculate_sub_scores(candidate, job, config) -> Dict[str, float]:
    """
    Calculate the four raw sub-scores for one candidate/job pair.

    Args:
        candidate: CandidateProfile
        job: JobPosting
        config: ScoringConfig selecting the signal variants

    Returns:
        Dict of unrounded scores keyed skills/experience/keywords/education
    """
    skills_score = calculate_skills_score(candidate.skills, job.skills)

    if config.keyword_variant == "candidate_presence":
        keywords_score = calculate_keyword_presence_score(
            candidate.keywords, job.description, job.requirements
        )
    else:
        keywords_score = calculate_keyword_overlap_score(candidate.keywords, job.keywords)

    if config.experience_variant == "text":
        experience_score = calculate_experience_text_score(candidate.experience, job.description)
    else:
        experience_score = calculate_years_experience_score(candidate.years_experience)

    if config.education_variant == "text":
        education_score = calculate_education_text_score(candidate.education, job.requirements)
    else:
        education_score = calculate_education_binary_score(candidate.education)

    return {
        "skills": skills_score,
        "experience": experience_score,
        "keywords": keywords_score,
        "education": education_score,
    }


def calculate_weighted_score(sub_scores: Dict[str, float], weights: Dict[str, float]) -> int:
    """
    Combine sub-scores into the overall score.

    Formula: round(sum(score_i * weight_i)), clamped to 0-100 as a final step
    so a misconfigured weight table cannot push the result out of range.
    """
    total = sum(clamp_score(sub_scores.get(name, 0.0)) * weight for name, weight in weights.items())
    overall = round_score(total)
    logger.debug(f"Weighted score: {total:.2f} -> {overall}")
    return overall
