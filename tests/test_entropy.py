"""Tests for passgen.entropy."""

import pytest

from passgen.entropy import DEFAULT_SOURCE, SecureRandomSource


def test_values_stay_in_range():
    source = SecureRandomSource()
    for upper in (1, 2, 7, 36, 94):
        for _ in range(200):
            assert 0 <= source.randbelow(upper) < upper


def test_upper_of_one_always_zero():
    assert {DEFAULT_SOURCE.randbelow(1) for _ in range(20)} == {0}


@pytest.mark.parametrize("upper", [0, -1])
def test_non_positive_upper_raises(upper):
    with pytest.raises(ValueError):
        SecureRandomSource().randbelow(upper)


def test_delegates_to_secrets(monkeypatch):
    seen = []

    def fake_randbelow(n):
        seen.append(n)
        return n - 1

    monkeypatch.setattr("passgen.entropy.secrets.randbelow", fake_randbelow)
    assert SecureRandomSource().randbelow(10) == 9
    assert seen == [10]
