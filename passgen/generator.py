"""
Password construction: charset assembly, random sampling and the
coverage repair that puts at least one character of every selected
class into the result.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field

from .config import CharacterClass, GenerationConfig, InvalidConfig, DEFAULT_CONFIG
from .entropy import RandomSource, DEFAULT_SOURCE

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """
    Full result of one password generation.
    """
    # Final password
    password: str

    # Combined alphabet the bulk characters were drawn from
    charset: str

    # Effective alphabet per enabled class, in class order. Classes whose
    # alphabet was filtered down to nothing map to "".
    effective: dict[CharacterClass, str]

    # Classes the coverage repair had to insert, in the order repaired
    repaired: list[CharacterClass] = field(default_factory=list)

    config: GenerationConfig = DEFAULT_CONFIG


def effective_alphabets(config: GenerationConfig) -> dict[CharacterClass, str]:
    """
    Alphabet of each enabled class after the optional similarity filter.
    """
    out: dict[CharacterClass, str] = {}
    for char_class in config.ordered_classes:
        alphabet = config.alphabets[char_class]
        if config.avoid_similar:
            alphabet = "".join(
                ch for ch in alphabet if ch not in config.similar_characters
            )
        out[char_class] = alphabet
    return out


def build_charset(config: GenerationConfig) -> str:
    """
    Concatenate the effective alphabets of the enabled classes in class
    order. Raises InvalidConfig if nothing is left to draw from.
    """
    config.validate()
    charset = "".join(effective_alphabets(config).values())
    if not charset:
        raise InvalidConfig(
            "No characters left to choose from after excluding similar characters"
        )
    return charset


def _repair_coverage(
    chars: list[str],
    effective: dict[CharacterClass, str],
    source: RandomSource,
    strict: bool,
) -> list[CharacterClass]:
    """
    Overwrite one random position for each class missing from chars.

    Classes are visited in class order and each check sees the writes of
    the previous repairs. In non-strict mode a later repair may land on
    the position an earlier one used and erase that class again.

    In strict mode the position is drawn among those that are neither an
    earlier repair nor the only character of some other class. Such a
    position always exists when len(chars) >= number of classes; below
    that, any position may be picked.
    """
    repaired: list[CharacterClass] = []
    used: set[int] = set()

    for char_class, alphabet in effective.items():
        if not alphabet:
            continue
        if any(ch in alphabet for ch in chars):
            continue

        if strict:
            free = _free_positions(chars, effective, used)
            if free:
                position = free[source.randbelow(len(free))]
            else:
                position = source.randbelow(len(chars))
        else:
            position = source.randbelow(len(chars))

        chars[position] = alphabet[source.randbelow(len(alphabet))]
        used.add(position)
        repaired.append(char_class)

    return repaired


def _free_positions(
    chars: list[str],
    effective: dict[CharacterClass, str],
    used: set[int],
) -> list[int]:
    def class_of(ch: str) -> CharacterClass | None:
        for char_class, alphabet in effective.items():
            if ch in alphabet:
                return char_class
        return None

    owners = [class_of(ch) for ch in chars]
    counts = Counter(owner for owner in owners if owner is not None)
    return [
        i
        for i, owner in enumerate(owners)
        if i not in used and (owner is None or counts[owner] > 1)
    ]


def generate_password_with_meta(
    config: GenerationConfig | None = None,
    random_source: RandomSource | None = None,
) -> GenerationResult:
    """
    High-level generation pipeline with metadata:

    - Build the combined charset from the enabled classes.
    - Draw `length` uniform indices into it.
    - Repair class coverage.

    Random draws happen in a fixed order (all bulk indices first, then a
    position and a character per repaired class), so a scripted source
    reproduces the same password every time.
    """
    cfg = DEFAULT_CONFIG if config is None else config
    source = DEFAULT_SOURCE if random_source is None else random_source

    charset = build_charset(cfg)
    effective = effective_alphabets(cfg)

    chars = [charset[source.randbelow(len(charset))] for _ in range(cfg.length)]
    repaired = _repair_coverage(chars, effective, source, cfg.strict_coverage)

    logger.debug(
        "Generated %d-character password from %d-character charset "
        "(classes=%s, avoid_similar=%s, repaired=%s)",
        cfg.length,
        len(charset),
        ",".join(c.value for c in effective),
        cfg.avoid_similar,
        ",".join(c.value for c in repaired) or "none",
    )

    return GenerationResult(
        password="".join(chars),
        charset=charset,
        effective=effective,
        repaired=repaired,
        config=cfg,
    )


def generate_password(
    config: GenerationConfig | None = None,
    random_source: RandomSource | None = None,
) -> str:
    """
    Generate a password for `config` and return only the string.
    """
    return generate_password_with_meta(config, random_source).password
