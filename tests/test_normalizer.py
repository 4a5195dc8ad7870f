import pytest

from codesim.normalizer import Normalizer, Token, is_keyword


@pytest.fixture
def normalizer():
    return Normalizer()


def test_tokenization(normalizer):
    tokens = normalizer.process("int x = 5; if (x > 0) { return x; }")
    assert tokens
    keywords = {t.value for t in tokens if t.type == "keyword"}
    assert {"int", "if", "return"} <= keywords


def test_variable_normalization(normalizer):
    tokens = normalizer.process("int sum = 0; int count = 1;")
    identifiers = {t.value for t in tokens if t.type == "identifier"}
    assert "VAR_1" in identifiers
    assert "VAR_2" in identifiers


def test_comment_removal(normalizer):
    code = "int x = 5; // This is a comment\n/* Multi-line comment */ int y = 10;"
    tokens = normalizer.process(code)
    assert all("//" not in t.value and "/*" not in t.value for t in tokens)
    assert [t.value for t in tokens] == [
        "int", "VAR_1", "=", "VAR_2", ";", "int", "VAR_3", "=", "VAR_4", ";",
    ]


def test_exact_token_sequence(normalizer):
    assert normalizer.process("int x = 5;") == [
        Token("keyword", "int"),
        Token("identifier", "VAR_1"),
        Token("symbol", "="),
        Token("identifier", "VAR_2"),
        Token("symbol", ";"),
    ]


def test_repeated_names_share_alias(normalizer):
    tokens = normalizer.process("a = b + a;")
    assert [t.value for t in tokens] == ["VAR_1", "=", "VAR_2", "+", "VAR_1", ";"]


def test_multi_char_operators_split_into_symbols(normalizer):
    tokens = normalizer.process("a += 1")
    assert [t.value for t in tokens] == ["VAR_1", "+", "=", "VAR_2"]
    assert tokens[1].type == "symbol"


def test_unterminated_block_comment_is_kept(normalizer):
    tokens = normalizer.process("a /* b")
    assert [t.value for t in tokens] == ["VAR_1", "/", "*", "VAR_2"]


def test_line_comment_at_end_without_newline(normalizer):
    tokens = normalizer.process("return; // done")
    assert [t.value for t in tokens] == ["return", ";"]


def test_empty_input(normalizer):
    assert normalizer.process("") == []


@pytest.mark.parametrize(
    "word, expected",
    [("int", True), ("while", True), ("false", True), ("main", False), ("Int", False)],
)
def test_is_keyword(word, expected):
    assert is_keyword(word) is expected