"""Shared pytest fixtures; also makes the repo root importable for local runs."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import RANDOM_SEED  # noqa: E402
from utils.rng import RandomTwister  # noqa: E402


@pytest.fixture
def rng():
    return RandomTwister(RANDOM_SEED)


@pytest.fixture
def twin_rngs():
    return RandomTwister(RANDOM_SEED), RandomTwister(RANDOM_SEED)
