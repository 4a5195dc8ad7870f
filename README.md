# codesim

Building blocks for comparing pieces of C-like source code by structure and
meaning rather than by the names used in them. Source text is turned into
tokens, split into the basic blocks of a simple control-flow graph, and
blocks are compared by their semantic shape.

## Pipeline

1. `codesim.normalizer`
   - `Normalizer().process(code)` removes `//` and `/* */` comments. It then
     splits the text into `Token(type, value)` objects, where `type` is
     `"keyword"`, `"identifier"` or `"symbol"`.
   - Words are runs of ASCII letters, digits and underscores. Every other
     non-space character becomes a one-character symbol.
   - Identifiers are renamed `VAR_1`, `VAR_2`, ... in order of first
     appearance.
   - `is_keyword(word)` tells whether a word is in `KEYWORDS`: `int`,
     `float`, `double`, `char`, `if`, `else`, `while`, `for`, `return`,
     `class`, `void`, `public`, `private`, `const`, `static`, `struct`,
     `bool`, `true` and `false`.

2. `codesim.cfg_builder`
   - `CFGBuilder().build(tokens)` groups tokens into `BasicBlock(id, tokens,
     successors)` objects and returns a `CFG` with `blocks` (in order) and
     `block_map` (by id).
   - A block starts at each `if`, `else`, `while` or `for` keyword and ends
     after each `{` or `}`.
   - A block that holds `if`, `while` or `for` (see `BasicBlock.branches`)
     is linked to the next two blocks. Any other block is linked to the next
     block.

3. `codesim.semantic_hasher`
   - `SemanticHasher().hash_block(block)` hashes the block's pattern of
     keywords, `VAR` and operator classes. Blocks that differ only in
     variable names hash alike. An empty block hashes to `"EMPTY_BLOCK"`.
   - `compare_blocks(block1, block2)` returns `1.0` for equal hashes and
     `0.8` when both blocks reduce to related operations (arithmetic,
     comparison or control flow). Otherwise it returns `0.0`.

4. `codesim.scorer`
   - `Scorer` holds `structural_weight` and `semantic_weight`, which default
     to 0.4 and 0.6. `set_weights(structural_weight, semantic_weight)` scales
     them so that they sum to 1 and ignores them if their sum is not
     positive.
   - `semantic_similarity(cfg1, cfg2, matches)` averages `compare_blocks`
     over pairs of block positions. It skips pairs that fall outside either
     graph and returns `0.0` when no pair is valid.
   - `combine(structural, semantic)` returns the weighted sum, clamped to
     0.0..1.0.

## Example

```python
from codesim.normalizer import Normalizer
from codesim.cfg_builder import CFGBuilder
from codesim.semantic_hasher import SemanticHasher
from codesim.scorer import Scorer

normalizer = Normalizer()
builder = CFGBuilder()

cfg1 = builder.build(normalizer.process("int sum = 0; sum = sum + i;"))
cfg2 = builder.build(normalizer.process("int total = 0; total = total + j;"))

hasher = SemanticHasher()
print(hasher.hash_block(cfg1.blocks[0]) == hasher.hash_block(cfg2.blocks[0]))  # True

scorer = Scorer()
scorer.set_weights(0.4, 0.6)
semantic = scorer.semantic_similarity(cfg1, cfg2, [(0, 0)])
print(scorer.combine(1.0, semantic))  # 1.0
```

## Helpers

`codesim.string_utils` holds small text helpers:

- `trim`, `to_lower`, `to_upper` (ASCII letters only)
- `split`, which drops empty pieces, and `join`
- `jaccard_similarity`, over the two strings' character sets
- `levenshtein_distance`
- `simple_hash`, a stable 64-bit integer, and `calculate_hash`, the same value as a decimal string
- `read_file` and `write_file`, for whole text files; errors such as a missing file are raised
- `is_valid_identifier`
- `contains_keyword`, a substring test against several keywords

`codesim.graph_utils` provides a generic adjacency-list `Graph` with
`add_node`, `add_edge`, `neighbors`, `clear` and `len()`. It also has:

- `size_similarity(structure1, structure2)`, which compares two structures
  by their lengths alone.
- `connected_components(graph)`, which gives sets of node indices reached
  breadth-first along out-edges.

## What it does not do

- There is no command-line tool. Reading two files, scoring them and
  printing a verdict is left to the caller.
- There is no structural matcher. The package does not pair up blocks
  between two graphs or compute a structural similarity. The caller supplies
  the block pairs to `Scorer.semantic_similarity` and the structural figure
  to `Scorer.combine`.

## Tests

The test suite uses pytest; install the package with its `test` extra to get it.