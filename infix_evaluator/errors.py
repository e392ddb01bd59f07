"""Errors raised by the tokenizer, converter and evaluator.

Every failure of the engine on malformed input is one of these, so a
front-end only ever has to catch ``CalcError``.
"""

import typing as t


class CalcError(ValueError):
    """Base class for all expression errors.

    Args:
        message: A human readable description of the failure.
        position: Zero-based offset into the source text, if known.

    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.message: t.Final = message
        self.position: t.Final = position

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position})"


# ----------------------- Lexing ------------------------------------------


class LexError(CalcError):
    """The text contains a character run that cannot form a token."""


class MalformedNumber(LexError):
    """A numeric literal has a bad shape, e.g. ``1.2.3`` or ``1e``."""


class UnknownOperator(LexError):
    """A run of operator characters is not a registered operator."""


class MalformedToken(LexError):
    """A token text holds no token, or more than one."""


# ----------------------- Parsing -----------------------------------------


class ParseError(CalcError):
    """The token sequence is not a well formed infix expression."""


class UnmatchedParenthesis(ParseError):
    """A ``(`` was never closed, or a ``)`` was never opened."""


# ----------------------- Evaluation --------------------------------------


class EvalError(CalcError):
    """The postfix sequence cannot be reduced to a single number."""


class StackUnderflow(EvalError):
    """An operator was reached with fewer than two operands available."""


class MalformedExpression(EvalError):
    """Evaluation finished with anything other than exactly one value."""


class NonIntegerOperand(EvalError):
    """An integer-only operator received a non-integral operand."""


class DivisionByZero(EvalError):
    """The right operand of ``/`` or ``%`` was zero."""


class UndefinedResult(EvalError):
    """The operator has no finite real result for its operands."""
