# core_types.py

"""
Shared type definitions for the twister-rng project.

This module is intentionally small and dependency-free so it can be imported
from anywhere (utils/, tests/) without risk of circular imports.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Tuple, Union


# ---------- Basic aliases ----------

# Unsigned integer seed for the engine.
Seed = int

# numpy-style output shape: None -> scalar, int -> 1-D, tuple -> N-D.
Size = Optional[Union[int, Tuple[int, ...]]]

# Anything numpy accepts as a dtype (np.int32, "uint8", np.dtype("float32"), ...).
# Integer samplers require an integer kind, real samplers a floating kind.
IntegerDType = Any
RealDType = Any


# ---------- Lifecycle ----------


class EngineState(Enum):
    """
    Lifecycle of a RandomTwister.

    VALID:      constructed (or re-filled by a move-assign / swap) and ready
                to sample.
    MOVED_FROM: the engine was transferred elsewhere; sampling is an error.
    """

    VALID = "valid"
    MOVED_FROM = "moved-from"
