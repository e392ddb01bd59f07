"""Stack based evaluation of postfix token sequences."""

import logging
import math
import typing as t

from infix_evaluator.config import INTEGER_TOLERANCE
from infix_evaluator.errors import (
    DivisionByZero,
    MalformedExpression,
    MalformedNumber,
    NonIntegerOperand,
    StackUnderflow,
    UndefinedResult,
    UnknownOperator,
)
from infix_evaluator.operators import OperatorRegistry, OperatorSpec
from infix_evaluator.stack import Stack
from infix_evaluator.tokenizer import Token, TokenKind

logger = logging.getLogger(__name__)


def _parse_number(token: Token, /) -> float:
    try:
        return float(token.text)
    except ValueError:
        raise MalformedNumber(
            f"malformed number {token.text!r}", token.position,
        ) from None


def _to_integer(value: float, spec: OperatorSpec, token: Token, /) -> int:
    """Round an operand of an integer-only operator.

    Raises:
        NonIntegerOperand: If ``value`` is further than the tolerance from
            the nearest whole number.

    """
    if math.isfinite(value):
        rounded = round(value)
        if abs(rounded - value) <= INTEGER_TOLERANCE:
            return rounded

    raise NonIntegerOperand(
        f"operator {spec.symbol!r} requires integer operands, got {value!r}",
        token.position,
    )


def _apply(spec: OperatorSpec, token: Token, left: float, right: float, /) -> float:
    """Apply ``spec`` and map arithmetic failures onto evaluation errors."""
    operands: tuple[float, float] | tuple[int, int] = (left, right)
    if spec.integer_only:
        operands = (
            _to_integer(left, spec, token),
            _to_integer(right, spec, token),
        )

    try:
        result = float(spec.apply(*operands))
        # Finite operands must give a finite result, whichever operator
        # overflowed. Operands that are already infinite pass through.
        if not math.isfinite(result) and math.isfinite(left) and math.isfinite(right):
            raise OverflowError("result out of range")
        return result
    except ZeroDivisionError:
        raise DivisionByZero(
            f"division by zero in {spec.symbol!r}", token.position,
        ) from None
    except (OverflowError, ValueError) as ex:
        raise UndefinedResult(
            f"{spec.name.lower()} of {left!r} and {right!r} is undefined: {ex}",
            token.position,
        ) from ex


def evaluate_postfix(tokens: t.Iterable[Token], registry: OperatorRegistry, /) -> float:
    """Reduce a postfix token sequence to a single number.

    The first operand popped for an operator is its right operand, so the
    operands keep their source order.

    Raises:
        StackUnderflow: If an operator has fewer than two operands.
        NonIntegerOperand: If an integer-only operator gets a fraction.
        DivisionByZero: If ``/`` or ``%`` gets a zero divisor.
        UndefinedResult: If the result overflows or is not a real number.
        MalformedExpression: If anything but a single value remains.

    """
    operands: t.Final[Stack[float]] = Stack()

    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            operands.push(_parse_number(token))
            continue

        if token.kind is not TokenKind.OPERATOR:
            raise MalformedExpression(
                f"unexpected {token.text!r} in postfix sequence", token.position,
            )

        spec = registry.lookup(token.text)
        if spec is None:
            raise UnknownOperator(f"unknown operator {token.text!r}", token.position)

        if len(operands) < 2:
            raise StackUnderflow(
                f"not enough operands for {token.text!r}", token.position,
            )

        right = operands.pop()
        left = operands.pop()
        operands.push(_apply(spec, token, left, right))

    if len(operands) != 1:
        logger.debug("Evaluation left %s", operands)
        raise MalformedExpression(
            f"expression reduced to {len(operands)} values instead of 1",
        )

    return operands.pop()
