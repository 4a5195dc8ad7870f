"""Tokenizing, control-flow blocks and semantic similarity scoring for C-like source code."""

__version__ = "0.1.0"

__all__ = [
    "cfg_builder",
    "graph_utils",
    "normalizer",
    "scorer",
    "semantic_hasher",
    "string_utils",
]