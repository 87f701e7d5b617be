"""
Unit tests for the deterministic CV-job matching engine.
"""

import random
import unittest
import logging

from cvmatch import (
    CandidateProfile, JobPosting, ScoringConfig, score_one, rank_all,
    RELEVANCE_THRESHOLD, skills_equivalent,
)
from cvmatch.config import SCORING_PRESETS

# Configure logging for tests
logging.basicConfig(level=logging.INFO)

STANDARD = ScoringConfig(**SCORING_PRESETS["standard"])
TEXT_OVERLAP = ScoringConfig(**SCORING_PRESETS["text_overlap"])

TIER_PREFIXES = ("Excellent match!", "Good match.", "Fair match.", "Limited match.")


def make_job(title, skills=None, keywords=None, **kwargs):
    return JobPosting(title=title, company="Acme", skills=skills or [], keywords=keywords or [], **kwargs)


# Candidate and catalog used by the ranking tests
BACKEND_CANDIDATE = CandidateProfile(
    skills=["Python", "Django", "PostgreSQL"],
    keywords=["backend", "api"],
    education=["BSc Computer Science"],
    years_experience=0.5,
)

CATALOG = [
    make_job("Python Developer", ["Python", "Django"], ["backend development", "rest api"]),   # 83
    make_job("Platform Engineer", ["Python", "Docker"], ["backend"]),                         # 63
    make_job("Generalist", [], []),                                                            # 53
    make_job("Android Developer", ["Java", "Kotlin"], ["mobile"]),                            # 23
    make_job("iOS Developer", ["Swift"], ["ios"]),                                             # 23
]


class TestScoreOne(unittest.TestCase):
    """Test scoring a single job."""

    def test_partial_skill_match_scenario(self):
        """Three of five job skills matched gives 60 and the right skill lists."""
        candidate = CandidateProfile(skills=["React", "Node.js", "TypeScript"])
        job = make_job("Frontend Engineer", ["React", "Node.js", "TypeScript", "AWS", "Docker"])

        result = score_one(candidate, job, STANDARD)

        self.assertEqual(result.matching_skills, ["React", "Node.js", "TypeScript"])
        self.assertEqual(result.missing_skills, ["AWS", "Docker"])
        self.assertEqual(result.sub_scores.skills, 60)
        # 60*0.4 + 50*0.3 + 50*0.2 + 50*0.1
        self.assertEqual(result.overall_score, 54)
        self.assertEqual(
            result.explanation,
            "Fair match. You have 3 matching skills: React, Node.js, TypeScript. "
            "Consider developing: AWS, Docker."
        )

    def test_alias_skill_match_scenario(self):
        """A python candidate fully satisfies a job asking for py."""
        result = score_one(CandidateProfile(skills=["python"]), make_job("Scripting", ["py"]), STANDARD)
        self.assertEqual(result.sub_scores.skills, 100)
        self.assertEqual(result.matching_skills, ["py"])
        self.assertEqual(result.missing_skills, [])

    def test_no_job_skills_is_neutral(self):
        """Jobs without skills score exactly 50 on skills."""
        result = score_one(CandidateProfile(skills=["Go"], years_experience=6), make_job("Anything"), STANDARD)
        self.assertEqual(result.sub_scores.skills, 50)
        self.assertEqual(result.matching_skills, [])
        self.assertEqual(result.missing_skills, [])
        # 50*0.4 + 90*0.3 + 50*0.2 + 50*0.1 = 62
        self.assertEqual(result.overall_score, 62)
        self.assertEqual(result.explanation, "Good match.")

    def test_identical_skill_sets_score_100(self):
        """Same skill set on both sides gives a perfect skills score."""
        skills = ["Go", "Rust", "Kafka"]
        result = score_one(CandidateProfile(skills=skills), make_job("Infra", skills), STANDARD)
        self.assertEqual(result.sub_scores.skills, 100)

    def test_disjoint_skill_sets_score_0(self):
        """Disjoint non-empty skill sets give a zero skills score."""
        result = score_one(CandidateProfile(skills=["Go"]), make_job("Design", ["Figma", "Sketch"]), STANDARD)
        self.assertEqual(result.sub_scores.skills, 0)
        self.assertEqual(result.missing_skills, ["Figma", "Sketch"])

    def test_superfluous_candidate_skills_not_listed(self):
        """Candidate-only skills never appear in the result lists."""
        candidate = CandidateProfile(skills=["Python", "Haskell", "Elixir"])
        result = score_one(candidate, make_job("Data", ["Python", "Spark"]), STANDARD)
        self.assertEqual(result.matching_skills, ["Python"])
        self.assertEqual(result.missing_skills, ["Spark"])

    def test_text_overlap_preset(self):
        """Text-overlap preset uses presence keywords and snippet overlap."""
        candidate = CandidateProfile(
            skills=["Python"],
            keywords=["python", "aws", "kubernetes"],
            experience=["python services", "java"],
            education=["computer science", "mba"],
        )
        job = make_job(
            "Backend Engineer",
            ["Python", "AWS"],
            description="We build Python services on AWS.",
            requirements=["3+ years experience", "BSc in Computer Science"],
        )

        result = score_one(candidate, job, TEXT_OVERLAP)

        self.assertEqual(result.sub_scores.skills, 50)
        self.assertEqual(result.sub_scores.keywords, 67)
        self.assertEqual(result.sub_scores.experience, 50)
        self.assertEqual(result.sub_scores.education, 50)
        # 50*0.4 + 50*0.2 + 66.67*0.3 + 50*0.1
        self.assertEqual(result.overall_score, 55)

    def test_result_is_immutable(self):
        """MatchResult cannot be modified after construction."""
        result = score_one(BACKEND_CANDIDATE, CATALOG[0], STANDARD)
        with self.assertRaises(Exception):
            result.overall_score = 0

    def test_to_dict(self):
        """Serialized result carries job and scores."""
        data = score_one(BACKEND_CANDIDATE, CATALOG[0], STANDARD).to_dict()
        self.assertEqual(data["overall_score"], 83)
        self.assertEqual(data["job"]["title"], "Python Developer")
        self.assertEqual(data["job"]["employment_type"], "full-time")
        self.assertEqual(set(data["sub_scores"]), {"skills", "experience", "keywords", "education"})


class TestRankAll(unittest.TestCase):
    """Test ranking a catalog of jobs."""

    def test_min_score_filters_low_matches(self):
        """Two of five jobs below 30 are dropped; the rest are descending."""
        results = rank_all(BACKEND_CANDIDATE, CATALOG, min_score=RELEVANCE_THRESHOLD, config=STANDARD)
        self.assertEqual([r.job.title for r in results], ["Python Developer", "Platform Engineer", "Generalist"])
        self.assertEqual([r.overall_score for r in results], [83, 63, 53])

    def test_no_filter_keeps_every_job(self):
        """min_score=0 keeps one result per input job."""
        results = rank_all(BACKEND_CANDIDATE, CATALOG, config=STANDARD)
        self.assertEqual(len(results), len(CATALOG))
        scores = [r.overall_score for r in results]
        self.assertEqual(scores, sorted(scores, reverse=True))

    def test_ties_keep_input_order(self):
        """Equal scores keep the order the jobs were given in."""
        results = rank_all(BACKEND_CANDIDATE, CATALOG, config=STANDARD)
        self.assertEqual([r.job.title for r in results[-2:]], ["Android Developer", "iOS Developer"])

        reversed_results = rank_all(BACKEND_CANDIDATE, list(reversed(CATALOG)), config=STANDARD)
        self.assertEqual([r.job.title for r in reversed_results[-2:]], ["iOS Developer", "Android Developer"])

    def test_parallel_matches_sequential(self):
        """Scoring in a thread pool gives the same ranking."""
        sequential = rank_all(BACKEND_CANDIDATE, CATALOG, config=STANDARD)
        parallel = rank_all(BACKEND_CANDIDATE, CATALOG, config=STANDARD, max_workers=4)
        self.assertEqual(sequential, parallel)

    def test_empty_catalog(self):
        """No jobs gives no results."""
        self.assertEqual(rank_all(BACKEND_CANDIDATE, [], config=STANDARD), [])


class TestProperties(unittest.TestCase):
    """Invariants checked over a spread of generated inputs."""

    POOL = ["Python", "py", "JavaScript", "js", "Node.js", "C", "C++", "cpp", "AWS",
            "Amazon Web Services", "React", "reactjs", "Docker", "SQL", "PostgreSQL", "Go", ""]

    def setUp(self):
        self.rng = random.Random(42)

    def _sample(self):
        return self.rng.sample(self.POOL, self.rng.randint(0, 6))

    def test_scores_in_range_and_skills_partitioned(self):
        """Every score is an int in 0-100 and skill lists partition the job skills."""
        for _ in range(200):
            candidate = CandidateProfile(
                skills=self._sample(),
                keywords=self._sample(),
                experience=self._sample(),
                education=self._sample(),
                years_experience=self.rng.choice([None, -2, 0, 1, 3.5, 12]),
            )
            job = make_job("Job", self._sample(), self._sample(), description=" ".join(self._sample()))
            for config in (STANDARD, TEXT_OVERLAP):
                result = score_one(candidate, job, config)

                for value in [result.overall_score, *result.sub_scores.model_dump().values()]:
                    self.assertIsInstance(value, int)
                    self.assertGreaterEqual(value, 0)
                    self.assertLessEqual(value, 100)

                job_keys = {s.strip().lower() for s in job.skills if s.strip()}
                matching = {s.lower() for s in result.matching_skills}
                missing = {s.lower() for s in result.missing_skills}
                self.assertFalse(matching & missing)
                self.assertEqual(matching | missing, job_keys)
                self.assertTrue(result.explanation.startswith(TIER_PREFIXES))

    def test_equivalence_is_symmetric(self):
        """skills_equivalent(a, b) == skills_equivalent(b, a)."""
        for a in self.POOL:
            for b in self.POOL:
                self.assertEqual(skills_equivalent(a, b), skills_equivalent(b, a), (a, b))

    def test_scoring_is_deterministic(self):
        """Same inputs produce the same result."""
        first = score_one(BACKEND_CANDIDATE, CATALOG[1], STANDARD)
        second = score_one(BACKEND_CANDIDATE, CATALOG[1], STANDARD)
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
