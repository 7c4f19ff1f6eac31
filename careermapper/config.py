# careermapper/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# --- Salary estimator ---

# Base salary (LPA) shown when no career clears the match threshold.
SALARY_FLOOR_LPA = _env_int("CAREERMAPPER_SALARY_FLOOR", 8)
SALARY_MIN_MATCH_SCORE = _env_int("CAREERMAPPER_SALARY_MIN_SCORE", 30)
SALARY_TOP_N = _env_int("CAREERMAPPER_SALARY_TOP_N", 3)

# --- Missing links ---

GAP_MIN_MATCH_SCORE = _env_int("CAREERMAPPER_GAP_MIN_SCORE", 50)
GAP_SALARY_FACTOR = _env_float("CAREERMAPPER_GAP_SALARY_FACTOR", 0.7)
GAP_MIN_INCREASE_LPA = _env_float("CAREERMAPPER_GAP_MIN_INCREASE", 2.0)
GAP_MAX_RESULTS = _env_int("CAREERMAPPER_GAP_MAX_RESULTS", 3)

# --- Roadmap export ---

ROADMAP_FOOTER = "Generated by iiskills.cloud Career Mapper"

# --- Local persistence ---

CAREERMAPPER_HOME: str = os.environ.get("CAREERMAPPER_HOME", "").strip() or ".careermapper"


@dataclass(frozen=True)
class MapperConfig:
    salary_floor: int
    salary_min_score: int
    salary_top_n: int
    gap_min_score: int
    gap_salary_factor: float
    gap_min_increase: float
    gap_max_results: int
    roadmap_min_score: int
    roadmap_top_n: int


def load_mapper_config() -> MapperConfig:
    """Read thresholds fresh from the environment (module constants are import-time)."""
    return MapperConfig(
        salary_floor=_env_int("CAREERMAPPER_SALARY_FLOOR", 8),
        salary_min_score=_env_int("CAREERMAPPER_SALARY_MIN_SCORE", 30),
        salary_top_n=_env_int("CAREERMAPPER_SALARY_TOP_N", 3),
        gap_min_score=_env_int("CAREERMAPPER_GAP_MIN_SCORE", 50),
        gap_salary_factor=_env_float("CAREERMAPPER_GAP_SALARY_FACTOR", 0.7),
        gap_min_increase=_env_float("CAREERMAPPER_GAP_MIN_INCREASE", 2.0),
        gap_max_results=_env_int("CAREERMAPPER_GAP_MAX_RESULTS", 3),
        roadmap_min_score=_env_int("CAREERMAPPER_ROADMAP_MIN_SCORE", 40),
        roadmap_top_n=_env_int("CAREERMAPPER_ROADMAP_TOP_N", 5),
    )


def default_home_dir() -> Path:
    return Path(CAREERMAPPER_HOME)
