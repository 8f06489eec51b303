import pytest

from pertok.char_classes import (
    BOUNDARY_DECISION_CHARS,
    SINGLE_TOKEN_CHARS,
    build_lookup,
    class_of,
    is_boundary_decision,
    is_single_token,
    is_whitespace,
)


@pytest.mark.parametrize("char", list("'+-./:@&"))
def test_ambiguous_punctuation_is_a_decision(char):
    assert class_of(char) == "DECISION"
    assert is_boundary_decision(char)
    assert not is_single_token(char)


@pytest.mark.parametrize("char", list("!\"#$%(),;<=>?[\\]^_{|}~¡«»¿"))
def test_symbols_are_single_tokens(char):
    assert class_of(char) == "SINGLE"


@pytest.mark.parametrize("char", ["a", "Z", "ş", "İ", "7", " ", "\t", "—", "😀"])
def test_other_characters_are_ordinary(char):
    assert class_of(char) == "ORDINARY"


def test_every_character_has_exactly_one_class():
    for char in set(SINGLE_TOKEN_CHARS) | set(BOUNDARY_DECISION_CHARS):
        assert is_single_token(char) + is_boundary_decision(char) == 1


def test_build_lookup_is_sized_to_largest_codepoint():
    lookup = build_lookup("ab")

    assert lookup.shape == (ord("b") + 1,)
    assert lookup[ord("a")] and lookup[ord("b")]
    assert lookup.sum() == 2


def test_build_lookup_is_read_only():
    lookup = build_lookup("ab")

    with pytest.raises(ValueError):
        lookup[0] = True


def test_build_lookup_of_empty_set():
    assert build_lookup("").shape == (0,)


@pytest.mark.parametrize("char", [" ", "\t", "\n", "\r", "\x0b", "\x1c", "\u2003", "\u3000"])
def test_separators_are_whitespace(char):
    assert is_whitespace(char)


@pytest.mark.parametrize("char", ["\u00a0", "\u2007", "\u202f", "\u0085", "a", "-"])
def test_no_break_spaces_are_not_whitespace(char):
    assert not is_whitespace(char)
