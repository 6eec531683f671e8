"""
Random source used by the carver.

Anything with ``random()`` and ``choice()`` works; ``random.Random`` is the
usual pick and is what ``make_rng`` returns.
"""

import random
from typing import Any, Optional, Protocol, Sequence

from .errors import InvalidArgumentError


class RandomSource(Protocol):
    def random(self) -> float: ...

    def choice(self, seq: Sequence[Any]) -> Any: ...


def make_rng(seed: Optional[int] = None) -> random.Random:
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise InvalidArgumentError(f"seed must be an integer or None, got {seed!r}")
    # None gives an OS-seeded generator, same as random.Random()
    return random.Random(seed)
