"""Random source helpers.

Every generation call receives its own ``numpy.random.Generator``; nothing
here holds state.  The helpers return plain Python scalars so results
serialise to JSON without numpy types leaking out.
"""

from typing import Callable, Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")

RngFactory = Callable[[], np.random.Generator]

_TOKEN_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return a fresh generator; ``None`` draws from OS entropy."""
    return np.random.default_rng(seed)


def rng_factory(seed: Optional[int] = None) -> RngFactory:
    """Build a factory yielding an independent generator per call.

    With a seed, every generator starts from the same state, so identical
    inputs reproduce identical outputs.
    """
    return lambda: make_rng(seed)


def uniform(rng: np.random.Generator, low: float, high: float) -> float:
    return float(rng.uniform(low, high))


def chance(rng: np.random.Generator, probability: float) -> bool:
    """Return True with the given probability."""
    return float(rng.random()) < probability


def pick(rng: np.random.Generator, options: Sequence[T]) -> T:
    return options[int(rng.integers(0, len(options)))]


def randint(rng: np.random.Generator, low: int, high: int) -> int:
    """Integer in ``[low, high)``."""
    return int(rng.integers(low, high))


def token(rng: np.random.Generator, length: int = 9) -> str:
    """Opaque lowercase base-36 identifier."""
    return "".join(pick(rng, _TOKEN_ALPHABET) for _ in range(length))
