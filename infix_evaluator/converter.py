"""Infix to postfix conversion using the shunting-yard algorithm.

1) Numbers go straight to the output.

2) "(" is pushed onto the operator stack.

3) ")" pops operators to the output until the matching "(" is found, which
is discarded.

4) An operator pops the operators above it that must be applied first,
then is pushed itself. For a left-associative operator an equal rank on the
stack is popped, so "8/4/2" is "(8/4)/2". For a right-associative operator
only a strictly lower rank is popped, so equal ranks pile up and "2**3**2"
is "2**(3**2)".

5) At the end of input the remaining operators are popped to the output.
"""

import logging
import typing as t

from infix_evaluator.errors import UnknownOperator, UnmatchedParenthesis
from infix_evaluator.operators import OperatorRegistry, OperatorSpec
from infix_evaluator.stack import Stack
from infix_evaluator.tokenizer import Token, TokenKind

logger = logging.getLogger(__name__)


def _spec_for(token: Token, registry: OperatorRegistry, /) -> OperatorSpec:
    spec = registry.lookup(token.text)
    if spec is None:
        # Only reachable when tokens were built against another registry.
        raise UnknownOperator(f"unknown operator {token.text!r}", token.position)
    return spec


def _should_pop(incoming: OperatorSpec, stacked: OperatorSpec, /) -> bool:
    """Return True if ``stacked`` has to be output before ``incoming``."""
    if incoming.left_associative:
        return incoming.precedence >= stacked.precedence
    return incoming.precedence > stacked.precedence


def to_postfix(tokens: t.Iterable[Token], registry: OperatorRegistry, /) -> list[Token]:
    """Reorder infix tokens into postfix order.

    Raises:
        UnmatchedParenthesis: If the parentheses do not balance.

    """
    output: list[Token] = []
    operators: t.Final[Stack[Token]] = Stack()

    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            output.append(token)

        elif token.kind is TokenKind.LEFT_PAREN:
            operators.push(token)

        elif token.kind is TokenKind.RIGHT_PAREN:
            while not operators.empty() and operators.back().kind is not TokenKind.LEFT_PAREN:
                output.append(operators.pop())
            if operators.empty():
                raise UnmatchedParenthesis("unmatched right parenthesis", token.position)
            operators.pop()

        else:
            incoming = _spec_for(token, registry)
            while not operators.empty() and operators.back().kind is TokenKind.OPERATOR:
                if not _should_pop(incoming, _spec_for(operators.back(), registry)):
                    break
                output.append(operators.pop())
            operators.push(token)

    while not operators.empty():
        token = operators.pop()
        if token.kind is TokenKind.LEFT_PAREN:
            raise UnmatchedParenthesis("unmatched left parenthesis", token.position)
        output.append(token)

    logger.debug("Postfix order: %s", [token.text for token in output])
    return output
