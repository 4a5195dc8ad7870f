"""Semantic fingerprinting and comparison of basic blocks."""

from __future__ import annotations

import hashlib

from .cfg_builder import BasicBlock
from .normalizer import Token

EMPTY_BLOCK = "EMPTY_BLOCK"

_SYMBOL_CLASSES = {
    **dict.fromkeys(("+", "-", "*", "/"), "ARITH_OP"),
    **dict.fromkeys(("=", "+=", "-=", "*=", "/="), "ASSIGN_OP"),
    **dict.fromkeys(("==", "!=", "<", ">", "<=", ">="), "COMP_OP"),
    **dict.fromkeys(("&&", "||", "!"), "LOGIC_OP"),
    **dict.fromkeys(("{", "}"), "BLOCK"),
    **dict.fromkeys(("(", ")"), "PAREN"),
    ";": "STMT_END",
}

_KEYWORD_OPERATIONS = {"if": "CONDITIONAL", "while": "LOOP", "for": "LOOP", "return": "RETURN"}

_SYMBOL_OPERATIONS = {
    **dict.fromkeys(("+", "+="), "ADD"),
    **dict.fromkeys(("-", "-="), "SUB"),
    **dict.fromkeys(("*", "*="), "MUL"),
    **dict.fromkeys(("/", "/="), "DIV"),
    "=": "ASSIGN",
    **dict.fromkeys(("==", "!="), "EQUALITY"),
    **dict.fromkeys(("<", ">", "<=", ">="), "COMPARISON"),
}

_OPERATION_GROUPS = (
    frozenset({"ADD", "SUB", "MUL", "DIV"}),
    frozenset({"EQUALITY", "COMPARISON"}),
    frozenset({"CONDITIONAL", "LOOP"}),
)


def _pattern_word(token: Token) -> str:
    if token.type == "keyword":
        return token.value
    if token.type == "identifier":
        return "VAR"
    return _SYMBOL_CLASSES.get(token.value, "SYM")


def _operation_word(token: Token) -> str | None:
    if token.type == "keyword":
        return _KEYWORD_OPERATIONS.get(token.value, token.value)
    return _SYMBOL_OPERATIONS.get(token.value)


class SemanticHasher:
    """Hashes blocks by the shape of their tokens and scores their likeness."""

    def hash_block(self, block: BasicBlock) -> str:
        """Return a stable hash of the block's semantic pattern."""
        if not block.tokens:
            return EMPTY_BLOCK
        pattern = "".join(f"{_pattern_word(t)} " for t in block.tokens)
        digest = hashlib.blake2b(pattern.encode("utf-8"), digest_size=8).digest()
        return str(int.from_bytes(digest, "big"))

    def compare_blocks(self, block1: BasicBlock, block2: BasicBlock) -> float:
        """Return 1.0 for matching patterns, 0.8 for related operations, else 0.0."""
        if self.hash_block(block1) == self.hash_block(block2):
            return 1.0
        op1 = self._operation_signature(block1.tokens)
        op2 = self._operation_signature(block2.tokens)
        if self._operations_similar(op1, op2):
            return 0.8
        return 0.0

    @staticmethod
    def _operation_signature(tokens: list[Token]) -> str:
        words = (_operation_word(t) for t in tokens)
        return "".join(f"{w} " for w in words if w is not None)

    @staticmethod
    def _operations_similar(op1: str, op2: str) -> bool:
        return any(op1 in group and op2 in group for group in _OPERATION_GROUPS)