"""Splitting a token stream into basic blocks linked as a control-flow graph."""

from __future__ import annotations

from dataclasses import dataclass, field

from .normalizer import Token

_BLOCK_STARTERS = frozenset({"if", "else", "while", "for"})
_BRANCHING = frozenset({"if", "while", "for"})
_DELIMITERS = frozenset({"{", "}"})


@dataclass
class BasicBlock:
    """A run of tokens with the ids of the blocks control may pass to."""

    id: int
    tokens: list[Token] = field(default_factory=list)
    successors: list[int] = field(default_factory=list)

    @property
    def branches(self) -> bool:
        """True if the block holds an if, while or for keyword."""
        return any(t.type == "keyword" and t.value in _BRANCHING for t in self.tokens)


@dataclass
class CFG:
    """Blocks in order of appearance, plus a lookup by block id."""

    blocks: list[BasicBlock] = field(default_factory=list)
    block_map: dict[int, BasicBlock] = field(default_factory=dict)

    def add(self, block: BasicBlock) -> None:
        self.blocks.append(block)
        self.block_map[block.id] = block


class CFGBuilder:
    """Builds a CFG from a normalized token list."""

    def build(self, tokens: list[Token]) -> CFG:
        """Split *tokens* into blocks and link each to its successors."""
        cfg = CFG()
        next_id = 0
        current = BasicBlock(next_id)

        for token in tokens:
            if token.type == "keyword" and token.value in _BLOCK_STARTERS:
                if current.tokens:
                    cfg.add(current)
                next_id += 1
                current = BasicBlock(next_id, [token])
            elif token.value in _DELIMITERS:
                current.tokens.append(token)
                cfg.add(current)
                next_id += 1
                current = BasicBlock(next_id)
            else:
                current.tokens.append(token)

        if current.tokens:
            cfg.add(current)

        self._link_successors(cfg)
        return cfg

    @staticmethod
    def _link_successors(cfg: CFG) -> None:
        blocks = cfg.blocks
        for position, block in enumerate(blocks):
            reach = 2 if block.branches else 1
            block.successors.extend(
                b.id for b in blocks[position + 1 : position + 1 + reach]
            )