import pytest

from codesim.cfg_builder import CFGBuilder
from codesim.normalizer import Normalizer
from codesim.scorer import Scorer


def _cfg(code):
    return CFGBuilder().build(Normalizer().process(code))


def _diagonal(cfg1, cfg2):
    return [(k, k) for k in range(min(len(cfg1.blocks), len(cfg2.blocks)))]


def test_identical_code():
    scorer = Scorer()
    cfg1 = _cfg("int sum = 0; for (int i = 0; i < 10; i++) { sum = sum + i; }")
    cfg2 = _cfg("int total = 0; for (int j = 0; j < 10; j++) { total = total + j; }")
    semantic = scorer.semantic_similarity(cfg1, cfg2, _diagonal(cfg1, cfg2))
    assert semantic == 1.0
    assert scorer.combine(1.0, semantic) > 0.9


def test_different_code():
    scorer = Scorer()
    cfg1 = _cfg("int sum = 0; sum = sum + 5;")
    cfg2 = _cfg("if (x > 0) { return x; } else { return 0; }")
    semantic = scorer.semantic_similarity(cfg1, cfg2, _diagonal(cfg1, cfg2))
    assert semantic == 0.0
    assert scorer.combine(0.0, semantic) < 0.5


def test_empty_matches_give_zero():
    scorer = Scorer()
    cfg = _cfg("int x = 5;")
    assert scorer.semantic_similarity(cfg, cfg, []) == 0.0


def test_out_of_range_matches_are_skipped():
    scorer = Scorer()
    cfg = _cfg("int x = 5;")
    assert scorer.semantic_similarity(cfg, cfg, [(5, 5), (-1, 0)]) == 0.0
    assert scorer.semantic_similarity(cfg, cfg, [(0, 0), (3, 0)]) == 1.0


def test_empty_graphs_have_no_valid_matches():
    scorer = Scorer()
    empty = _cfg("")
    assert scorer.semantic_similarity(empty, empty, [(0, 0)]) == 0.0


def test_weight_setting():
    scorer = Scorer()
    scorer.set_weights(0.7, 0.3)
    assert scorer.structural_weight == pytest.approx(0.7)
    assert scorer.semantic_weight == pytest.approx(0.3)
    assert scorer.combine(1.0, 0.0) == pytest.approx(0.7)


def test_weights_are_normalized():
    scorer = Scorer()
    scorer.set_weights(2.0, 6.0)
    assert scorer.structural_weight + scorer.semantic_weight == pytest.approx(1.0)
    assert scorer.structural_weight == pytest.approx(0.25)


def test_non_positive_weights_are_ignored():
    scorer = Scorer()
    scorer.set_weights(0.0, 0.0)
    assert (scorer.structural_weight, scorer.semantic_weight) == (0.4, 0.6)


def test_default_weights():
    scorer = Scorer()
    assert scorer.combine(1.0, 0.0) == pytest.approx(0.4)
    assert scorer.combine(0.0, 1.0) == pytest.approx(0.6)


def test_score_bounds():
    scorer = Scorer()
    cfg1 = _cfg("int x = 5;")
    cfg2 = _cfg("int y = 10;")
    semantic = scorer.semantic_similarity(cfg1, cfg2, _diagonal(cfg1, cfg2))
    assert 0.0 <= semantic <= 1.0
    assert 0.0 <= scorer.combine(0.5, semantic) <= 1.0


def test_combine_clamps():
    scorer = Scorer()
    assert scorer.combine(5.0, 5.0) == 1.0
    assert scorer.combine(-5.0, -5.0) == 0.0