"""Tests for Token and Category."""

from __future__ import annotations

import dataclasses

import pytest

from luthor.tokens import Category, Token


class TestToken:
    """Verify Token value semantics."""

    def test_equality_by_value(self) -> None:
        assert Token("let", Category.KEYWORD) == Token("let", Category.KEYWORD)
        assert Token("let", Category.KEYWORD) != Token("let", Category.TEXT)
        assert Token("let", Category.KEYWORD) != Token("var", Category.KEYWORD)

    def test_immutability(self) -> None:
        token = Token("let", Category.KEYWORD)
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.lexeme = "var"  # type: ignore[misc]

    def test_hashable(self) -> None:
        tokens = {Token("a", Category.TEXT), Token("a", Category.TEXT)}
        assert len(tokens) == 1

    def test_repr_is_compact(self) -> None:
        assert repr(Token("let", Category.KEYWORD)) == "Token(KEYWORD, 'let')"

    def test_repr_truncates_long_lexemes(self) -> None:
        token = Token("x" * 30, Category.STRING)
        assert repr(token) == f"Token(STRING, {'x' * 17 + '...'!r})"

    def test_repr_with_plain_label(self) -> None:
        assert repr(Token("a", "tag")) == "Token(tag, 'a')"

    def test_unhashable_label_is_accepted_but_not_hashable(self) -> None:
        token = Token("a", ["tag"])

        assert token == Token("a", ["tag"])
        with pytest.raises(TypeError):
            hash(token)


class TestCategory:
    """Verify the default category taxonomy."""

    def test_text_is_reserved_member(self) -> None:
        assert Category["TEXT"] is Category.TEXT

    def test_members_are_distinct(self) -> None:
        values = [member.value for member in Category]
        assert len(values) == len(set(values))
