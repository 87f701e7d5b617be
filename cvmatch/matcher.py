"""
Main Matcher Module

Orchestrates the complete matching process:
1. Partition the job's skills into matching / missing
2. Calculate the four deterministic sub-scores and the weighted overall score
3. Attach an explanation and rank results across jobs
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from .config import get_default_config
from .explanation import explain
from .models import CandidateProfile, JobPosting, MatchResult, ScoringConfig, SubScores
from .normalizer import partition_skills
from .scoring_engine import calculate_sub_scores, calculate_weighted_score, round_score

logger = logging.getLogger(__name__)


def score_one(
    candidate: CandidateProfile,
    job: JobPosting,
    config: Optional[ScoringConfig] = None
) -> MatchResult:
    """
    Score a single job against a candidate.

    Args:
        candidate: Candidate profile
        job: Job posting
        config: Scoring config (defaults to the process-wide config)

    Returns:
        MatchResult with overall score, sub-scores, skill lists and explanation

    Example:
        >>> result = score_one(candidate, job)
        >>> print(f"Match: {result.overall_score}%")
        >>> print(f"Skills: {result.sub_scores.skills}%")
    """
    if config is None:
        config = get_default_config()

    matching_skills, missing_skills = partition_skills(candidate.skills, job.skills)
    raw_scores = calculate_sub_scores(candidate, job, config)
    overall_score = calculate_weighted_score(raw_scores, config.weights)

    sub_scores = SubScores(**{name: round_score(value) for name, value in raw_scores.items()})
    logger.debug(
        f"Scored '{job.title}' at {job.company}: overall={overall_score} "
        f"skills={sub_scores.skills} experience={sub_scores.experience} "
        f"keywords={sub_scores.keywords} education={sub_scores.education}"
    )

    return MatchResult(
        job=job,
        overall_score=overall_score,
        sub_scores=sub_scores,
        matching_skills=matching_skills,
        missing_skills=missing_skills,
        explanation=explain(overall_score, matching_skills, missing_skills),
    )


def rank_all(
    candidate: CandidateProfile,
    jobs: Sequence[JobPosting],
    min_score: float = 0,
    config: Optional[ScoringConfig] = None,
    max_workers: Optional[int] = None
) -> List[MatchResult]:
    """
    Score every job against a candidate and rank the results.

    Args:
        candidate: Candidate profile
        jobs: Job postings to score
        min_score: Drop results whose overall score is below this (30 keeps only relevant ones)
        config: Scoring config (defaults to the process-wide config)
        max_workers: Score jobs in a thread pool of this size when greater than 1

    Returns:
        List of MatchResult sorted by overall score (highest first).
        Ties keep input order.
    """
    if config is None:
        config = get_default_config()
    jobs = list(jobs)
    logger.info(f"Ranking {len(jobs)} jobs (min_score={min_score})")

    if max_workers and max_workers > 1 and len(jobs) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(lambda job: score_one(candidate, job, config), jobs))
    else:
        results = [score_one(candidate, job, config) for job in jobs]

    relevant = [r for r in results if r.overall_score >= min_score]
    if len(relevant) < len(results):
        logger.info(f"Filtered out {len(results) - len(relevant)} jobs below {min_score}")

    # sorted() is stable, so equal scores keep input order
    ranked = sorted(relevant, key=lambda r: r.overall_score, reverse=True)

    if ranked:
        logger.info(f"Top match: {ranked[0].overall_score}% ({ranked[0].job.title})")
    return ranked
