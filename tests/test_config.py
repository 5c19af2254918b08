"""Tests for passgen.config."""

from __future__ import annotations

import dataclasses

import pytest

from passgen.config import (
    ALL_CLASSES,
    CharacterClass,
    DEFAULT_ALPHABETS,
    DEFAULT_CONFIG,
    GenerationConfig,
    InvalidConfig,
    SIMILAR_CHARACTERS,
)


def test_class_order_is_fixed():
    assert list(CharacterClass) == [
        CharacterClass.UPPERCASE,
        CharacterClass.LOWERCASE,
        CharacterClass.NUMBERS,
        CharacterClass.SYMBOLS,
    ]


def test_default_alphabets():
    assert DEFAULT_ALPHABETS[CharacterClass.UPPERCASE] == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert DEFAULT_ALPHABETS[CharacterClass.LOWERCASE] == "abcdefghijklmnopqrstuvwxyz"
    assert DEFAULT_ALPHABETS[CharacterClass.NUMBERS] == "0123456789"
    assert DEFAULT_ALPHABETS[CharacterClass.SYMBOLS] == "!@#$%^&*()_+-=[]{}|;:,.<>?"


def test_default_alphabets_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_ALPHABETS[CharacterClass.NUMBERS] = "123"  # type: ignore[index]


def test_similar_characters_cover_classic_lookalikes():
    for ch in "0Oo1Il|":
        assert ch in SIMILAR_CHARACTERS


def test_default_config():
    assert DEFAULT_CONFIG.length == 16
    assert DEFAULT_CONFIG.classes == ALL_CLASSES
    assert DEFAULT_CONFIG.avoid_similar is False
    assert DEFAULT_CONFIG.strict_coverage is False


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.length = 8  # type: ignore[misc]


def test_classes_are_normalized_to_frozenset():
    cfg = GenerationConfig(classes=[CharacterClass.NUMBERS, CharacterClass.UPPERCASE])
    assert isinstance(cfg.classes, frozenset)
    assert cfg.ordered_classes == [CharacterClass.UPPERCASE, CharacterClass.NUMBERS]


def test_from_flags():
    cfg = GenerationConfig.from_flags(
        length=12, uppercase=True, lowercase=False, numbers=True, symbols=False,
        avoid_similar=True,
    )
    assert cfg.length == 12
    assert cfg.classes == {CharacterClass.UPPERCASE, CharacterClass.NUMBERS}
    assert cfg.avoid_similar is True


def test_from_flags_custom_symbols():
    cfg = GenerationConfig.from_flags(symbol_alphabet="#$")
    assert cfg.alphabets[CharacterClass.SYMBOLS] == "#$"
    assert cfg.alphabets[CharacterClass.UPPERCASE] == DEFAULT_ALPHABETS[CharacterClass.UPPERCASE]
    # The shared default mapping is untouched.
    assert DEFAULT_ALPHABETS[CharacterClass.SYMBOLS] != "#$"


def test_validate_accepts_default():
    DEFAULT_CONFIG.validate()


def test_validate_rejects_no_classes():
    cfg = GenerationConfig.from_flags(
        uppercase=False, lowercase=False, numbers=False, symbols=False
    )
    with pytest.raises(InvalidConfig, match="at least one character type"):
        cfg.validate()


@pytest.mark.parametrize("length", [0, -3])
def test_validate_rejects_non_positive_length(length):
    with pytest.raises(InvalidConfig):
        GenerationConfig(length=length).validate()


def test_validate_rejects_non_integer_length():
    with pytest.raises(InvalidConfig):
        GenerationConfig(length="12").validate()  # type: ignore[arg-type]


def test_invalid_config_is_value_error():
    assert issubclass(InvalidConfig, ValueError)


def test_configs_compare_by_value():
    a = GenerationConfig.from_flags(length=10, symbols=False)
    b = GenerationConfig.from_flags(length=10, symbols=False)
    assert a == b
    assert hash(a) == hash(b)


def test_from_flags_empty_symbols_is_kept():
    cfg = GenerationConfig.from_flags(symbol_alphabet="")
    assert cfg.alphabets[CharacterClass.SYMBOLS] == ""
