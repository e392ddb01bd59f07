"""The two entry points a front-end needs, working on plain token text.

``parse_to_postfix`` turns an infix expression into postfix token text and
``evaluate`` reduces postfix token text to a number. Both take an optional
registry; without one they use ``DEFAULT_REGISTRY``, which holds the
built-in and extension operators. Extend a ``copy()`` of it rather than the
shared instance.
"""

import dataclasses
import typing as t

from infix_evaluator.converter import to_postfix
from infix_evaluator.errors import UnmatchedParenthesis
from infix_evaluator.operators import OperatorRegistry, default_registry
from infix_evaluator.postfix import evaluate_postfix
from infix_evaluator.tokenizer import Token, classify, tokenize

DEFAULT_REGISTRY: t.Final[OperatorRegistry] = default_registry()


def _resolve(registry: OperatorRegistry | None, /) -> OperatorRegistry:
    # An empty registry is falsy, so test for None explicitly.
    return DEFAULT_REGISTRY if registry is None else registry


def parse_to_postfix(
    expression: str,
    /,
    registry: OperatorRegistry | None = None,
) -> list[str]:
    """Convert an infix expression into postfix token text.

    Args:
        expression: The infix expression, e.g. ``"2 + 3 * 4"``.
        registry: The operators to recognise.

    Returns:
        list[str]: Each token as written, e.g. ``["2", "3", "4", "*", "+"]``.

    Raises:
        LexError: If the expression cannot be tokenized.
        ParseError: If the parentheses do not balance.

    """
    registry = _resolve(registry)
    return [token.text for token in to_postfix(tokenize(expression, registry), registry)]


def _tokens_from_text(
    postfix_tokens: t.Iterable[str],
    registry: OperatorRegistry,
    /,
) -> list[Token]:
    tokens: list[Token] = []
    # The position of a token in a postfix sequence is its index.
    for index, text in enumerate(postfix_tokens):
        token = dataclasses.replace(classify(text, registry), position=index)
        if token.is_parenthesis:
            raise UnmatchedParenthesis(
                "parentheses are not allowed in postfix input", index,
            )
        tokens.append(token)
    return tokens


def evaluate(
    postfix_tokens: t.Iterable[str],
    /,
    registry: OperatorRegistry | None = None,
) -> float:
    """Evaluate postfix token text.

    Args:
        postfix_tokens: Token text in postfix order, e.g. ``["1", "2", "+"]``.
        registry: The operators to apply.

    Returns:
        float: The value of the expression.

    Raises:
        TypeError: If ``postfix_tokens`` is a single string rather than a
            sequence of token text.
        LexError: If a token text is not a number or a known operator.
        EvalError: If the sequence does not reduce to one valid number.

    """
    if isinstance(postfix_tokens, str):
        # Iterating a string would read "12" as the two operands 1 and 2.
        raise TypeError(
            "postfix_tokens must be a sequence of token text, not a str; "
            "use split_postfix() on postfix text",
        )
    registry = _resolve(registry)
    return evaluate_postfix(_tokens_from_text(postfix_tokens, registry), registry)


def calculate(
    expression: str,
    /,
    registry: OperatorRegistry | None = None,
) -> tuple[list[str], float]:
    """Parse and evaluate an infix expression in one go."""
    postfix = parse_to_postfix(expression, registry)
    return postfix, evaluate(postfix, registry)
