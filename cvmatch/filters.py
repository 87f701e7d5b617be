"""Job catalog filtering applied before scoring."""

import logging
from datetime import datetime
from typing import Iterable, List

from .models import JobPosting, JobSearchFilters
from .normalizer import skills_equivalent

logger = logging.getLogger(__name__)


def _matches_search(job: JobPosting, search: str) -> bool:
    needle = search.lower()
    return any(needle in (field or "").lower() for field in (job.title, job.company, job.description))


def job_matches_filters(job: JobPosting, filters: JobSearchFilters) -> bool:
    if filters.search and not _matches_search(job, filters.search):
        return False

    if filters.location and filters.location.lower() not in job.location.lower():
        return False

    if filters.employment_type and job.employment_type != filters.employment_type:
        return False

    if filters.remote is not None and job.remote != filters.remote:
        return False

    if filters.skills:
        if not any(skills_equivalent(skill, job_skill) for skill in filters.skills for job_skill in job.skills):
            return False

    salary = job.salary
    if filters.salary_min is not None and salary and salary.min is not None:
        if salary.min < filters.salary_min:
            return False

    if filters.salary_max is not None and salary and salary.max is not None:
        if salary.max > filters.salary_max:
            return False

    return True


def filter_jobs(jobs: Iterable[JobPosting], filters: JobSearchFilters) -> List[JobPosting]:
    """
    Keep jobs satisfying every filter that is set, in input order.

    Jobs without salary data are never excluded by the salary bounds.
    """
    jobs = list(jobs)
    kept = [job for job in jobs if job_matches_filters(job, filters)]
    logger.debug(f"Filters kept {len(kept)}/{len(jobs)} jobs")
    return kept


def sort_by_posted_date(jobs: Iterable[JobPosting]) -> List[JobPosting]:
    """Newest first; undated jobs go last in input order."""
    jobs = list(jobs)
    dated = [j for j in jobs if j.posted_date is not None]
    undated = [j for j in jobs if j.posted_date is None]
    dated.sort(key=lambda j: _timestamp(j.posted_date), reverse=True)
    return dated + undated


def _timestamp(value: datetime) -> float:
    # naive datetimes are compared as UTC so mixed inputs stay orderable
    if value.tzinfo is None:
        return (value - datetime(1970, 1, 1)).total_seconds()
    return value.timestamp()
