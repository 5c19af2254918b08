"""
Character-class password generator package.
"""

from .config import (
    CharacterClass,
    GenerationConfig,
    InvalidConfig,
    DEFAULT_CONFIG,
    DEFAULT_ALPHABETS,
    SIMILAR_CHARACTERS,
)
from .entropy import RandomSource, SecureRandomSource
from .generator import GenerationResult, generate_password, generate_password_with_meta

__all__ = [
    "CharacterClass",
    "GenerationConfig",
    "InvalidConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_ALPHABETS",
    "SIMILAR_CHARACTERS",
    "RandomSource",
    "SecureRandomSource",
    "GenerationResult",
    "generate_password",
    "generate_password_with_meta",
]
