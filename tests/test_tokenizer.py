import pytest

from infix_evaluator import (
    MalformedNumber,
    MalformedToken,
    OperatorRegistry,
    TokenKind,
    UnknownOperator,
    UnmatchedParenthesis,
    default_registry,
    split_postfix,
    tokenize,
)
from infix_evaluator.tokenizer import classify
from tests.cases import TestCase, parametrize

REGISTRY = default_registry()

SPLITTING = (
    # ------------- Numbers ---------------------------------------------
    TestCase(description="Integer", expected=["42"], expression="42"),
    TestCase("Decimal", ["3.25"], "3.25"),
    TestCase("Trailing decimal point", ["3."], "3."),
    TestCase("Leading zeros kept as written", ["0007"], "0007"),
    TestCase("Exponent", ["1e3"], "1e3"),
    TestCase("Upper case exponent", ["2E2"], "2E2"),
    TestCase("Decimal with exponent", ["1.5e2"], "1.5e2"),
    TestCase("Negative exponent", ["1e-5"], "1e-5"),
    TestCase("Positive exponent", ["1e+5"], "1e+5"),
    TestCase("Signed exponent then operator", ["1e-5", "-", "2"], "1e-5-2"),
    # ------------- Operators -------------------------------------------
    TestCase("Single character operators", ["1", "+", "2", "*", "3"], "1+2*3"),
    TestCase("Power is one token", ["2", "**", "3"], "2**3"),
    TestCase("Shifts are one token", ["1", "<<", "2", ">>", "3"], "1<<2>>3"),
    TestCase("Whitespace splits operator runs", ["2", "*", "*", "3"], "2 * * 3"),
    TestCase("Bitwise operators", ["6", "^", "3", "&", "1", "|", "8"], "6^3&1|8"),
    # ------------- Parentheses and whitespace --------------------------
    TestCase("Parentheses", ["(", "1", ")"], "(1)"),
    TestCase("Parenthesis ends an operator run", ["2", "*", "(", "3", ")"], "2*(3)"),
    TestCase("ASCII whitespace", ["1", "+", "2"], " 1\n+\t2 "),
    TestCase("Empty expression", [], ""),
    TestCase("Whitespace only", [], "   "),
)

ERRORS = (
    TestCase("Two decimal points", MalformedNumber, "1.2.3"),
    TestCase("Two exponent markers", MalformedNumber, "1e2e3"),
    TestCase("Exponent without digits", MalformedNumber, "1e"),
    TestCase("Exponent sign without digits", MalformedNumber, "1e+"),
    TestCase("Decimal point after exponent", MalformedNumber, "1e5.2"),
    TestCase("Adjacent operators form an unknown symbol", UnknownOperator, "2*-3"),
    TestCase("Triple star", UnknownOperator, "2***3"),
    TestCase("Reserved bitwise-not", UnknownOperator, "~1"),
    TestCase("Reserved exclamation mark", UnknownOperator, "3!"),
    TestCase("Letters", UnknownOperator, "2 x 3"),
    TestCase("Leading decimal point", UnknownOperator, ".5"),
    # isdigit() would accept these.
    TestCase("Non ASCII digits", UnknownOperator, "五"),
    TestCase("Superscript", UnknownOperator, "2²"),
)


@parametrize(SPLITTING)
def test_tokenize(case):
    assert [token.text for token in tokenize(case.expression, REGISTRY)] == case.expected


@parametrize(ERRORS)
def test_tokenize_errors(case):
    with pytest.raises(case.expected):
        tokenize(case.expression, REGISTRY)


def test_token_kinds_and_positions():
    tokens = tokenize("(12 + 3)**2", REGISTRY)

    assert [token.kind for token in tokens] == [
        TokenKind.LEFT_PAREN,
        TokenKind.NUMBER,
        TokenKind.OPERATOR,
        TokenKind.NUMBER,
        TokenKind.RIGHT_PAREN,
        TokenKind.OPERATOR,
        TokenKind.NUMBER,
    ]
    assert [token.position for token in tokens] == [0, 1, 4, 6, 7, 8, 10]


def test_error_reports_position():
    with pytest.raises(MalformedNumber) as info:
        tokenize("1 + 1.2.3", REGISTRY)

    assert info.value.position == 4
    assert str(info.value) == "more than one decimal point in '1.2.3' (at position 4)"


def test_unknown_operator_message():
    with pytest.raises(UnknownOperator, match=r"unknown operator '\*-'"):
        tokenize("2*-3", REGISTRY)


def test_builtin_registry_rejects_extension_symbols():
    with pytest.raises(UnknownOperator):
        tokenize("2**3", OperatorRegistry())


def test_classify():
    assert classify("**", REGISTRY).kind is TokenKind.OPERATOR
    assert classify("1e-5", REGISTRY).kind is TokenKind.NUMBER

    with pytest.raises(MalformedToken, match="expected a single token"):
        classify("1 2", REGISTRY)
    with pytest.raises(MalformedToken):
        classify("", REGISTRY)


def test_split_postfix():
    assert split_postfix("2 3 2 ** **", REGISTRY) == ["2", "3", "2", "**", "**"]


def test_split_postfix_rejects_parentheses():
    with pytest.raises(UnmatchedParenthesis):
        split_postfix("1 2 + (", REGISTRY)
