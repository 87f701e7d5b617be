"""
Configuration for the deterministic CV-job matching engine.
Adjust weights, presets and lookup tables here.
"""

import os
import logging
from types import MappingProxyType
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Component weights (must sum to 1.0)
WEIGHTS = {
    "skills": 0.4,
    "experience": 0.3,
    "keywords": 0.2,
    "education": 0.1,
}

# Alternate weighting used together with the text-overlap signals
ALTERNATE_WEIGHTS = {
    "skills": 0.4,
    "experience": 0.2,
    "keywords": 0.3,
    "education": 0.1,
}

# Neutral / floor values used when a denominator would be zero
NEUTRAL_SCORE = 50
EXPERIENCE_TEXT_FLOOR = 30
EDUCATION_TEXT_FLOOR = 40
EMPTY_KEYWORDS_SCORE = 0

# Years-of-experience banding, checked top-down
EXPERIENCE_YEAR_BANDS = [
    (5, 90),
    (3, 75),
    (1, 60),
]
EXPERIENCE_DEFAULT_SCORE = 50

# Binary education scoring
EDUCATION_PRESENT_SCORE = 80
EDUCATION_ABSENT_SCORE = 50

# Minimum overall score for "relevant" matches
RELEVANCE_THRESHOLD = 30

# Explanation tiers (minimum score, prefix), checked top-down
EXPLANATION_TIERS = [
    (80, "Excellent match! "),
    (60, "Good match. "),
    (40, "Fair match. "),
    (0, "Limited match. "),
]
EXPLANATION_LIST_LIMIT = 3

# Signal variants
KEYWORD_VARIANTS = ("job_overlap", "candidate_presence")
EXPERIENCE_VARIANTS = ("years", "text")
EDUCATION_VARIANTS = ("binary", "text")

# Named scoring presets
SCORING_PRESETS = {
    "standard": {
        "weights": WEIGHTS,
        "keyword_variant": "job_overlap",
        "experience_variant": "years",
        "education_variant": "binary",
    },
    "text_overlap": {
        "weights": ALTERNATE_WEIGHTS,
        "keyword_variant": "candidate_presence",
        "experience_variant": "text",
        "education_variant": "text",
    },
}
DEFAULT_PRESET = "standard"

# Skill aliases: canonical name -> known variant spellings (all lowercase)
SKILL_ALIASES = MappingProxyType({
    "javascript": frozenset({"js", "node.js", "nodejs"}),
    "typescript": frozenset({"ts"}),
    "python": frozenset({"py"}),
    "react": frozenset({"reactjs", "react.js"}),
    "angular": frozenset({"angularjs"}),
    "vue": frozenset({"vuejs", "vue.js"}),
    "c++": frozenset({"cpp", "c plus plus"}),
    "c#": frozenset({"csharp", "c sharp"}),
    "postgresql": frozenset({"postgres", "psql"}),
    "mongodb": frozenset({"mongo"}),
    "amazon web services": frozenset({"aws"}),
    "google cloud platform": frozenset({"gcp"}),
    "microsoft azure": frozenset({"azure"}),
})

# Environment variables
ENV_PRESET = "CVMATCH_SCORING_PRESET"
ENV_KEYWORD_VARIANT = "CVMATCH_KEYWORD_VARIANT"
ENV_EXPERIENCE_VARIANT = "CVMATCH_EXPERIENCE_VARIANT"
ENV_EDUCATION_VARIANT = "CVMATCH_EDUCATION_VARIANT"
ENV_LOG_LEVEL = "CVMATCH_LOG_LEVEL"

_default_config = None


def _choice(value: Optional[str], allowed, name: str) -> Optional[str]:
    if value is None or not value.strip():
        return None
    value = value.strip().lower()
    if value not in allowed:
        raise ValueError(f"Invalid {name} '{value}', expected one of: {', '.join(allowed)}")
    return value


def load_scoring_config(preset: Optional[str] = None):
    """
    Build a ScoringConfig from a preset name and environment overrides.

    The preset comes from the argument, else CVMATCH_SCORING_PRESET, else
    "standard". Individual signal variants may be overridden with
    CVMATCH_KEYWORD_VARIANT, CVMATCH_EXPERIENCE_VARIANT and
    CVMATCH_EDUCATION_VARIANT.

    Raises:
        ValueError: If a preset or variant name is unknown
    """
    from .models import ScoringConfig

    load_dotenv()

    name = _choice(preset or os.getenv(ENV_PRESET), SCORING_PRESETS, "scoring preset") or DEFAULT_PRESET
    settings = dict(SCORING_PRESETS[name])

    overrides = {
        "keyword_variant": _choice(os.getenv(ENV_KEYWORD_VARIANT), KEYWORD_VARIANTS, "keyword variant"),
        "experience_variant": _choice(os.getenv(ENV_EXPERIENCE_VARIANT), EXPERIENCE_VARIANTS, "experience variant"),
        "education_variant": _choice(os.getenv(ENV_EDUCATION_VARIANT), EDUCATION_VARIANTS, "education variant"),
    }
    for key, value in overrides.items():
        if value is not None:
            logger.info(f"Overriding {key} from environment: {value}")
            settings[key] = value

    config = ScoringConfig(**settings)
    logger.debug(f"Loaded scoring config '{name}': {config}")
    return config


def get_default_config():
    """Return the process-wide scoring config, loading it on first use."""
    global _default_config
    if _default_config is None:
        _default_config = load_scoring_config()
    return _default_config


def reset_default_config():
    """Forget the cached config (useful for testing)."""
    global _default_config
    _default_config = None
