"""Tokenizing and identifier normalization of C-like source text."""

from __future__ import annotations

import re
from dataclasses import dataclass

KEYWORDS = frozenset(
    {
        "int", "float", "double", "char", "if", "else", "while",
        "for", "return", "class", "void", "public", "private", "const",
        "static", "struct", "bool", "true", "false",
    }
)

_LINE_COMMENT = re.compile(r"//[^\n]*")
_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)


def is_keyword(word: str) -> bool:
    """Return True if *word* is one of the recognised language keywords."""
    return word in KEYWORDS


@dataclass(frozen=True)
class Token:
    """A lexical token: its kind ("keyword", "identifier", "symbol") and text."""

    type: str
    value: str


def _is_word_char(char: str) -> bool:
    return char == "_" or (char.isascii() and char.isalnum())


def _word_token(word: str) -> Token:
    return Token("keyword" if is_keyword(word) else "identifier", word)


class Normalizer:
    """Turns source text into a token list with identifiers renamed VAR_1, VAR_2, ..."""

    def process(self, code: str) -> list[Token]:
        """Strip comments, tokenize and normalize identifiers in *code*."""
        tokens = self._tokenize(self._remove_comments(code))
        return self._normalize_variables(tokens)

    @staticmethod
    def _remove_comments(code: str) -> str:
        code = _LINE_COMMENT.sub("", code)
        return _BLOCK_COMMENT.sub("", code)

    @staticmethod
    def _tokenize(code: str) -> list[Token]:
        tokens: list[Token] = []
        word: list[str] = []
        for char in code:
            if _is_word_char(char):
                word.append(char)
                continue
            if word:
                tokens.append(_word_token("".join(word)))
                word.clear()
            if not char.isspace():
                tokens.append(Token("symbol", char))
        if word:
            tokens.append(_word_token("".join(word)))
        return tokens

    @staticmethod
    def _normalize_variables(tokens: list[Token]) -> list[Token]:
        names: dict[str, str] = {}
        result = []
        for token in tokens:
            if token.type == "identifier" and not is_keyword(token.value):
                alias = names.setdefault(token.value, f"VAR_{len(names) + 1}")
                token = Token(token.type, alias)
            result.append(token)
        return result