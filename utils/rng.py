# utils/rng.py

"""
Random number generator utilities.

We wrap NumPy's Generator API (backed by the MT19937 Mersenne Twister bit
generator) in a small move-only class, `RandomTwister`, that covers the
common cases:

  - uniform integers in a closed range, for any numpy integer dtype,
  - uniform reals in a closed range (float32 / float64),
  - uniform probabilities in [0, 1],
  - normally distributed doubles.

Assumptions baked into this class:
  - Cryptographic-level randomness is unnecessary. Do NOT use this for
    keys, tokens or anything security related; use `secrets` instead.
  - Moderately high space usage is okay (the engine keeps 624 32-bit words
    of state).
  - Seeding with a single unsigned integer's worth of entropy is okay.

Instances are move-only. Copying would duplicate the engine state and
produce two perfectly correlated streams, so `copy.copy`, `copy.deepcopy`
and pickling all raise TypeError. Ownership is transferred explicitly with
`take()`, `assign_from()` or `swap()`; the source of a move is left in the
moved-from state and refuses to sample.

Typical usage:

    from utils.rng import make_rng

    rng = make_rng(42)
    roll = rng.uniform_int(1, 6)
    noise = rng.normal_real(0.0, 0.5, size=100)

Instances are not thread safe. Use one instance per thread.
"""

from __future__ import annotations

import math
from typing import Any, Optional

import numpy as np

from config import DEFAULT_NORMAL_MEAN, DEFAULT_NORMAL_SIGMA, SEED_MAX, SEED_MIN
from core_types import EngineState, IntegerDType, RealDType, Seed, Size
from utils.logging_utils import get_logger


logger = get_logger(__name__)


class InvalidRangeError(ValueError):
    """Raised when a sampling range is empty (low > high) or not finite."""


class MovedFromError(RuntimeError):
    """Raised when a RandomTwister is used after its engine was moved out."""


# -------------------------------------------------------------------
# Argument validation helpers
# -------------------------------------------------------------------


def _check_seed(seed: Any, where: str) -> Seed:
    """
    Validate an unsigned integer seed and return it as a plain int.
    """
    if isinstance(seed, (bool, np.bool_)) or not isinstance(seed, (int, np.integer)):
        raise TypeError(f"{where}: seed must be an unsigned integer, got {type(seed).__name__}")
    seed = int(seed)
    if not SEED_MIN <= seed <= SEED_MAX:
        raise ValueError(f"{where}: seed must be in [{SEED_MIN}, {SEED_MAX}], got {seed}")
    return seed


def _entropy_seed() -> Seed:
    """
    Draw one 64-bit seed from the OS entropy source.

    SeedSequence() with no argument reads fresh entropy from the operating
    system (not guaranteed to be cryptographic quality for our purposes).
    """
    return int(np.random.SeedSequence().generate_state(1, dtype=np.uint64)[0])


def _integer_dtype(dtype: IntegerDType, where: str) -> np.dtype:
    dt = np.dtype(dtype)
    if not np.issubdtype(dt, np.integer):
        raise TypeError(f"{where}: dtype must be an integer type, got {dt}")
    return dt


def _real_dtype(dtype: RealDType, where: str) -> np.dtype:
    dt = np.dtype(dtype)
    if dt not in (np.dtype(np.float32), np.dtype(np.float64)):
        raise TypeError(f"{where}: dtype must be float32 or float64, got {dt}")
    return dt


def _check_int_bound(value: Any, dt: np.dtype, name: str, where: str) -> int:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{where}: {name} must be an integer, got {type(value).__name__}")
    value = int(value)
    info = np.iinfo(dt)
    if not info.min <= value <= info.max:
        raise ValueError(
            f"{where}: {name}={value} does not fit in {dt} [{info.min}, {info.max}]"
        )
    return value


# -------------------------------------------------------------------
# RandomTwister
# -------------------------------------------------------------------


class RandomTwister:
    """
    Move-only convenience wrapper around a Mersenne Twister engine.

    Args:
        seed:
            If provided, an unsigned integer that fully determines the
            output sequence. If None, a seed is drawn once from the OS
            entropy source; it is still recorded in `initial_seed` so the
            run can be reproduced.

    Raises:
        TypeError / ValueError:
            If the seed is not an unsigned integer in [SEED_MIN, SEED_MAX].
        MemoryError:
            If the engine state cannot be allocated. Never caught here.
    """

    __slots__ = ("_engine", "_seed")

    def __init__(self, seed: Optional[Seed] = None) -> None:
        if seed is None:
            seed = _entropy_seed()
            logger.debug("RandomTwister seeded from OS entropy (seed=%d)", seed)
        else:
            seed = _check_seed(seed, "RandomTwister")
            logger.debug("RandomTwister seeded explicitly (seed=%d)", seed)

        self._engine: Optional[np.random.Generator] = np.random.Generator(np.random.MT19937(seed))
        self._seed: Optional[Seed] = seed

    @classmethod
    def _adopt(cls, engine: np.random.Generator, seed: Optional[Seed]) -> "RandomTwister":
        # Bypass __init__ so no new engine is allocated.
        obj = cls.__new__(cls)
        obj._engine = engine
        obj._seed = seed
        return obj

    def _require_engine(self, where: str) -> np.random.Generator:
        if self._engine is None:
            raise MovedFromError(f"{where}: RandomTwister was moved from and can no longer be used")
        return self._engine

    # ---------- State inspection ----------

    @property
    def state(self) -> EngineState:
        return EngineState.VALID if self._engine is not None else EngineState.MOVED_FROM

    @property
    def is_valid(self) -> bool:
        return self._engine is not None

    @property
    def initial_seed(self) -> Optional[Seed]:
        """
        Seed that produced the current stream (last constructor or seed()
        call). None once the instance has been moved from.
        """
        return self._seed

    def __repr__(self) -> str:
        if self._engine is None:
            return f"{type(self).__name__}(<moved-from>)"
        return f"{type(self).__name__}(seed={self._seed})"

    # ---------- Sampling ----------

    def uniform_int(
        self,
        low: int,
        high: int,
        dtype: IntegerDType = np.int64,
        size: Size = None,
    ) -> Any:
        """
        Uniform integer in the closed range [low, high].

        Every integer in range is equally likely. `dtype` may be any numpy
        integer type (signed or unsigned, 8 to 64 bits) and both bounds
        must be representable in it. Returns a numpy scalar of `dtype`, or
        an ndarray when `size` is given.
        """
        engine = self._require_engine("uniform_int")
        dt = _integer_dtype(dtype, "uniform_int")
        low = _check_int_bound(low, dt, "low", "uniform_int")
        high = _check_int_bound(high, dt, "high", "uniform_int")
        if low > high:
            raise InvalidRangeError(f"uniform_int: low={low} is greater than high={high}")

        return engine.integers(low, high, size=size, dtype=dt, endpoint=True)

    def uniform_real(
        self,
        low: float,
        high: float,
        dtype: RealDType = np.float64,
        size: Size = None,
    ) -> Any:
        """
        Uniform real number in the closed range [low, high].

        The result follows a continuous uniform distribution over the real
        interval, not a uniform choice among representable floats: even
        though a double can represent far more values in [0, 1] than in
        [99, 100], uniform_real(0.0, 100.0) lands in each of those two
        sub-ranges equally often.
        """
        engine = self._require_engine("uniform_real")
        dt = _real_dtype(dtype, "uniform_real")

        low_f, high_f = float(low), float(high)
        if not (math.isfinite(low_f) and math.isfinite(high_f)):
            raise InvalidRangeError(f"uniform_real: bounds must be finite, got [{low}, {high}]")
        if low_f > high_f:
            raise InvalidRangeError(f"uniform_real: low={low} is greater than high={high}")

        with np.errstate(over="ignore"):
            lo = dt.type(low_f)
            hi = dt.type(high_f)
            span = hi - lo
        if not (np.isfinite(lo) and np.isfinite(hi)):
            raise InvalidRangeError(f"uniform_real: bounds [{low}, {high}] overflow {dt}")
        if not np.isfinite(span):
            raise InvalidRangeError(f"uniform_real: range [{low}, {high}] is too wide for {dt}")

        u = engine.random(size=size, dtype=dt)
        if size is None:
            u = dt.type(u)

        # Rounding in lo + span * u can land a hair above hi; clamp to keep
        # the range closed.
        return np.clip(lo + span * u, lo, hi)

    def uniform_probability(self, size: Size = None) -> Any:
        """Uniform double in [0.0, 1.0]."""
        return self.uniform_real(0.0, 1.0, dtype=np.float64, size=size)

    def normal_real(
        self,
        mean: float = DEFAULT_NORMAL_MEAN,
        sigma: float = DEFAULT_NORMAL_SIGMA,
        size: Size = None,
    ) -> Any:
        """
        Double drawn from a normal distribution N(mean, sigma**2).

        Defaults give a standard normal. sigma == 0 always returns mean.
        """
        engine = self._require_engine("normal_real")
        mean_f, sigma_f = float(mean), float(sigma)
        if not (math.isfinite(mean_f) and math.isfinite(sigma_f)):
            raise ValueError(f"normal_real: mean and sigma must be finite, got mean={mean}, sigma={sigma}")
        if sigma_f < 0.0:
            raise ValueError(f"normal_real: sigma must be non-negative, got {sigma}")

        return engine.normal(mean_f, sigma_f, size=size)

    # ---------- Reseeding ----------

    def seed(self, value: Seed) -> None:
        """
        Reseed the engine in place.

        The following samples match those of a fresh RandomTwister(value),
        whatever this instance produced before.
        """
        engine = self._require_engine("seed")
        value = _check_seed(value, "seed")

        # Overwrite the existing bit generator's state rather than
        # allocating a new Generator around it.
        engine.bit_generator.state = np.random.MT19937(value).state
        self._seed = value
        logger.debug("RandomTwister reseeded (seed=%d)", value)

    # ---------- Ownership transfer ----------

    def take(self) -> "RandomTwister":
        """
        Move-construct: return a new RandomTwister owning this engine.

        The new instance continues exactly where this one left off. This
        instance becomes moved-from.
        """
        engine = self._require_engine("take")
        moved = type(self)._adopt(engine, self._seed)
        self._engine = None
        self._seed = None
        logger.debug("RandomTwister engine moved to a new owner")
        return moved

    def assign_from(self, other: "RandomTwister") -> "RandomTwister":
        """
        Move-assign: take `other`'s engine, releasing the current one.

        `other` becomes moved-from. Works on a moved-from `self`, which
        becomes valid again. Assigning an instance to itself is a no-op.
        """
        if other is self:
            return self
        engine = other._require_engine("assign_from")
        self._engine = engine
        self._seed = other._seed
        other._engine = None
        other._seed = None
        logger.debug("RandomTwister engine move-assigned")
        return self

    def swap(self, other: "RandomTwister") -> None:
        """Exchange engines (and their seeds) with `other`."""
        self._engine, other._engine = other._engine, self._engine
        self._seed, other._seed = other._seed, self._seed

    # ---------- Duplication is disallowed ----------

    def __copy__(self) -> "RandomTwister":
        raise TypeError(
            f"{type(self).__name__} cannot be copied; use take() or assign_from() to transfer it"
        )

    def __deepcopy__(self, memo: dict) -> "RandomTwister":
        raise TypeError(
            f"{type(self).__name__} cannot be copied; use take() or assign_from() to transfer it"
        )

    def __reduce_ex__(self, protocol: int) -> Any:
        raise TypeError(f"{type(self).__name__} cannot be pickled")


def swap(lhs: RandomTwister, rhs: RandomTwister) -> None:
    """Non-member swap; same as lhs.swap(rhs)."""
    lhs.swap(rhs)


def make_rng(seed: Optional[Seed] = None) -> RandomTwister:
    """
    Create a RandomTwister.

    Args:
        seed:
            If provided, used to seed the engine deterministically.
            If None, the seed comes from OS entropy.

    Returns:
        RandomTwister instance.
    """
    if seed is None:
        return RandomTwister()
    return RandomTwister(seed)
