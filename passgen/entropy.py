"""
Random sources for the generator.

The generator only needs one primitive: a uniform integer in [0, upper).
Anything providing randbelow() can be passed in, which is how tests
script exact outputs.
"""

from __future__ import annotations

import secrets
from typing import Protocol


class RandomSource(Protocol):
    def randbelow(self, upper: int) -> int:
        """Return a uniform integer in [0, upper)."""
        ...


class SecureRandomSource:
    """
    Operating-system CSPRNG via the secrets module.

    secrets.randbelow rejection-samples, so indices carry no modulo bias
    regardless of the alphabet size. Holds no state between calls.
    """

    def randbelow(self, upper: int) -> int:
        if upper <= 0:
            raise ValueError(f"upper must be positive, got {upper}")
        return secrets.randbelow(upper)


DEFAULT_SOURCE = SecureRandomSource()
