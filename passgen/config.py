"""
Configuration for the character-class password generator.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


class InvalidConfig(ValueError):
    """Raised when a configuration cannot produce a password."""


class CharacterClass(enum.Enum):
    # Declaration order is the order used to build the charset
    # and to run the coverage repair.
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NUMBERS = "numbers"
    SYMBOLS = "symbols"


DEFAULT_ALPHABETS: Mapping[CharacterClass, str] = MappingProxyType(
    {
        CharacterClass.UPPERCASE: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
        CharacterClass.LOWERCASE: "abcdefghijklmnopqrstuvwxyz",
        CharacterClass.NUMBERS: "0123456789",
        CharacterClass.SYMBOLS: "!@#$%^&*()_+-=[]{}|;:,.<>?",
    }
)

# Glyphs that are easy to confuse with one another on screen.
SIMILAR_CHARACTERS: frozenset[str] = frozenset(
    "0Oo1Il|i5S2Zz8B6bG9gqCcPpVvWwXxUunmrtf"
)

ALL_CLASSES: frozenset[CharacterClass] = frozenset(CharacterClass)

# Range offered by the length slider. The generator itself accepts any
# length >= 1.
MIN_UI_LENGTH = 4
MAX_UI_LENGTH = 50
DEFAULT_LENGTH = 16


@dataclass(frozen=True)
class GenerationConfig:
    # Desired password length in characters.
    length: int = DEFAULT_LENGTH

    # Character classes to draw from. Must not be empty.
    classes: frozenset[CharacterClass] = ALL_CLASSES

    # Drop SIMILAR_CHARACTERS from every class alphabet.
    avoid_similar: bool = False

    # When True, a coverage repair never overwrites an earlier repair or
    # the only character of another class (while such positions remain).
    # When False, repairs may overwrite one another.
    strict_coverage: bool = False

    alphabets: Mapping[CharacterClass, str] = field(
        default_factory=lambda: DEFAULT_ALPHABETS, repr=False, hash=False
    )
    similar_characters: frozenset[str] = field(
        default=SIMILAR_CHARACTERS, repr=False
    )

    def __post_init__(self) -> None:
        # Accept any iterable of classes but always store a frozenset.
        object.__setattr__(self, "classes", frozenset(self.classes))
        object.__setattr__(
            self, "similar_characters", frozenset(self.similar_characters)
        )
        if not isinstance(self.alphabets, MappingProxyType):
            object.__setattr__(
                self, "alphabets", MappingProxyType(dict(self.alphabets))
            )

    @classmethod
    def from_flags(
        cls,
        length: int = DEFAULT_LENGTH,
        uppercase: bool = True,
        lowercase: bool = True,
        numbers: bool = True,
        symbols: bool = True,
        avoid_similar: bool = False,
        strict_coverage: bool = False,
        symbol_alphabet: str | None = None,
    ) -> "GenerationConfig":
        """
        Build a config from the four class toggles a UI or CLI holds.

        symbol_alphabet replaces the default symbols when given; an empty
        string leaves the symbol class with nothing to draw from.
        """
        flags = {
            CharacterClass.UPPERCASE: uppercase,
            CharacterClass.LOWERCASE: lowercase,
            CharacterClass.NUMBERS: numbers,
            CharacterClass.SYMBOLS: symbols,
        }
        alphabets: Mapping[CharacterClass, str] = DEFAULT_ALPHABETS
        if symbol_alphabet is not None:
            alphabets = {**DEFAULT_ALPHABETS, CharacterClass.SYMBOLS: symbol_alphabet}

        return cls(
            length=length,
            classes=frozenset(c for c, on in flags.items() if on),
            avoid_similar=avoid_similar,
            strict_coverage=strict_coverage,
            alphabets=alphabets,
        )

    @property
    def ordered_classes(self) -> list[CharacterClass]:
        """Enabled classes in the fixed class order."""
        return [c for c in CharacterClass if c in self.classes]

    def validate(self) -> None:
        if not self.classes:
            raise InvalidConfig("Please select at least one character type")
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise InvalidConfig(
                f"Password length must be an integer, got {self.length!r}"
            )
        if self.length < 1:
            raise InvalidConfig(
                f"Password length must be at least 1, got {self.length}"
            )
        missing = [c.value for c in self.classes if c not in self.alphabets]
        if missing:
            raise InvalidConfig(
                f"No alphabet defined for: {', '.join(sorted(missing))}"
            )


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = GenerationConfig()
