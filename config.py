# config.py

"""
Global configuration for the twister-rng project.

This module centralizes:
  - filesystem paths (only used when logging to disk),
  - seed bounds and the default seed used by examples / tests,
  - default parameters for the normal distribution,
  - logging format knobs.

Nothing here is read from the environment; change values in this file
if you need different defaults.
"""

from __future__ import annotations

from pathlib import Path


# -------------------------------------------------------------------
# Core paths
# -------------------------------------------------------------------

# Root of the project (directory containing config.py)
PROJECT_ROOT: Path = Path(__file__).resolve().parent

# Directory for logs (if you want to write logs to disk)
LOGS_DIR: Path = PROJECT_ROOT / "logs"


# -------------------------------------------------------------------
# Seeding
# -------------------------------------------------------------------

# Seed used by examples and tests when reproducibility is wanted.
RANDOM_SEED: int = 42

# Seeds are unsigned integers. We accept anything up to a 64-bit
# unsigned long; the engine mixes it through numpy's SeedSequence.
SEED_MIN: int = 0
SEED_MAX: int = 2**64 - 1


# -------------------------------------------------------------------
# Distribution defaults
# -------------------------------------------------------------------

# normal_real() with no arguments samples a standard normal.
DEFAULT_NORMAL_MEAN: float = 0.0
DEFAULT_NORMAL_SIGMA: float = 1.0


# -------------------------------------------------------------------
# Logging
# -------------------------------------------------------------------

LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"
LOG_FILENAME: str = "twister_rng.log"
