"""Tokenizer.

Splits expression text into numbers, operators and parentheses.

1) Whitespace is skipped. It never starts a token, but it does end one, so
"2 * * 3" yields two "*" tokens while "2 ** 3" yields one "**".

2) A digit starts a number. Digits, "." and an exponent marker are consumed
greedily; a "+" or "-" directly after the exponent marker is the exponent's
sign ("1e-5" is a single literal). The run must then have the shape
``digits [. digits] [e [sign] digits]``.

3) "(" and ")" are tokens of their own.

4) Anything else must start a run of operator characters. The whole run is
the candidate symbol, and it has to be registered: "**" is power, but "*-"
is an unknown operator rather than "*" followed by "-".
"""

import dataclasses
import enum
import logging
import re
import typing as t

from infix_evaluator.config import (
    EXPONENT_MARKERS,
    EXPONENT_SIGNS,
    OPERATOR_ALPHABET,
)
from infix_evaluator.errors import (
    MalformedNumber,
    MalformedToken,
    UnknownOperator,
    UnmatchedParenthesis,
)
from infix_evaluator.operators import OperatorRegistry

logger = logging.getLogger(__name__)

_NUMBER_PATTERN: t.Final = re.compile(r"[0-9]+(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?")


class TokenKind(enum.Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"


@dataclasses.dataclass(frozen=True, slots=True)
class Token:
    """A single lexical token.

    Args:
        kind: What the token is.
        text: The source text of the token, exactly as written.
        position: Zero-based offset of the token in the source text.

    """

    kind: TokenKind
    text: str
    position: int = 0

    @property
    def is_parenthesis(self) -> bool:
        return self.kind in (TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN)


def _is_digit(char: str, /) -> bool:
    # str.isdigit() would also accept characters such as "²" or "五".
    return "0" <= char <= "9"


def _read_number(text: str, start: int, /) -> Token:
    """Consume the numeric literal starting at ``start``."""
    end = start + 1
    decimal_points = 0
    exponent_markers = 0

    while end < len(text):
        char = text[end]
        if char == ".":
            decimal_points += 1
        elif char in EXPONENT_MARKERS:
            exponent_markers += 1
            if end + 1 < len(text) and text[end + 1] in EXPONENT_SIGNS:
                end += 1
        elif not _is_digit(char):
            break
        end += 1

    literal = text[start:end]
    if decimal_points > 1:
        raise MalformedNumber(
            f"more than one decimal point in {literal!r}", start,
        )
    if exponent_markers > 1:
        raise MalformedNumber(
            f"more than one exponent marker in {literal!r}", start,
        )
    if not _NUMBER_PATTERN.fullmatch(literal):
        # e.g. "1e", "1e+" or "1e5.2".
        raise MalformedNumber(f"malformed number {literal!r}", start)

    return Token(TokenKind.NUMBER, literal, start)


def _read_operator(text: str, start: int, registry: OperatorRegistry, /) -> Token:
    """Consume the maximal run of operator characters at ``start``."""
    end = start
    while end < len(text) and text[end] in OPERATOR_ALPHABET:
        end += 1

    if end == start:
        raise UnknownOperator(f"unexpected character {text[start]!r}", start)

    symbol = text[start:end]
    if not registry.is_operator(symbol):
        raise UnknownOperator(f"unknown operator {symbol!r}", start)

    return Token(TokenKind.OPERATOR, symbol, start)


def tokenize(text: str, registry: OperatorRegistry, /) -> list[Token]:
    """Convert expression text into a list of tokens.

    Raises:
        MalformedNumber: If a numeric literal is badly formed.
        UnknownOperator: If a character run is not a registered operator or
            a character cannot start any token.

    """
    tokens: list[Token] = []
    position = 0

    while position < len(text):
        char = text[position]

        if char.isspace():
            position += 1
            continue

        if _is_digit(char):
            token = _read_number(text, position)
        elif char == "(":
            token = Token(TokenKind.LEFT_PAREN, char, position)
        elif char == ")":
            token = Token(TokenKind.RIGHT_PAREN, char, position)
        else:
            token = _read_operator(text, position, registry)

        tokens.append(token)
        position += len(token.text)

    logger.debug("Tokenized %r into %s", text, [token.text for token in tokens])
    return tokens


def classify(text: str, registry: OperatorRegistry, /) -> Token:
    """Turn the text of exactly one token back into a token.

    Raises:
        MalformedToken: If ``text`` holds no token or more than one.

    """
    tokens = tokenize(text, registry)
    if len(tokens) != 1:
        raise MalformedToken(f"expected a single token, got {text!r}")
    return tokens[0]


def split_postfix(text: str, registry: OperatorRegistry, /) -> list[str]:
    """Split text that is already in postfix order into token text.

    Postfix text has no parentheses; finding one is reported as an
    unmatched parenthesis.
    """
    tokens = tokenize(text, registry)
    for token in tokens:
        if token.is_parenthesis:
            raise UnmatchedParenthesis(
                "parentheses are not allowed in postfix input", token.position,
            )
    return [token.text for token in tokens]
