"""
Deterministic CV-Job Matching Engine

Scores a candidate profile against job postings with four weighted signals
(skills, experience, keywords, education) and returns ranked, explained
results. Pure and synchronous: no I/O, no model calls.

Usage:
    from cvmatch import CandidateProfile, JobPosting, rank_all

    results = rank_all(candidate, jobs, min_score=RELEVANCE_THRESHOLD)
    print(f"Top match: {results[0].overall_score}%")
"""

from .config import WEIGHTS, ALTERNATE_WEIGHTS, RELEVANCE_THRESHOLD, load_scoring_config
from .explanation import explain
from .filters import filter_jobs, sort_by_posted_date
from .matcher import score_one, rank_all
from .models import (
    CandidateProfile, JobPosting, MatchResult, SubScores, SalaryRange,
    EmploymentType, JobSearchFilters, ScoringConfig,
)
from .normalizer import skills_equivalent

__all__ = [
    "score_one",
    "rank_all",
    "skills_equivalent",
    "explain",
    "filter_jobs",
    "sort_by_posted_date",
    "load_scoring_config",
    "CandidateProfile",
    "JobPosting",
    "MatchResult",
    "SubScores",
    "SalaryRange",
    "EmploymentType",
    "JobSearchFilters",
    "ScoringConfig",
    "WEIGHTS",
    "ALTERNATE_WEIGHTS",
    "RELEVANCE_THRESHOLD",
]
__version__ = "1.0.0"
