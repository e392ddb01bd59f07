"""Infix expression evaluator.

             +------------+     +--------------+     +--------------------+
 [text] >>> | tokenize() | >>> | to_postfix() | >>> | evaluate_postfix() | >>> [number]
            +------------+     +--------------+     +--------------------+

``parse_to_postfix`` and ``evaluate`` wrap the pipeline for front-ends that
work on plain token text.
"""

import logging

from infix_evaluator.api import DEFAULT_REGISTRY, calculate, evaluate, parse_to_postfix
from infix_evaluator.converter import to_postfix
from infix_evaluator.errors import (
    CalcError,
    DivisionByZero,
    EvalError,
    LexError,
    MalformedExpression,
    MalformedNumber,
    MalformedToken,
    NonIntegerOperand,
    ParseError,
    StackUnderflow,
    UndefinedResult,
    UnknownOperator,
    UnmatchedParenthesis,
)
from infix_evaluator.operators import (
    BUILTIN_OPERATORS,
    EXTENSION_OPERATORS,
    Associativity,
    OperatorRegistry,
    OperatorSpec,
    default_registry,
)
from infix_evaluator.postfix import evaluate_postfix
from infix_evaluator.tokenizer import Token, TokenKind, split_postfix, tokenize

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Associativity",
    "BUILTIN_OPERATORS",
    "CalcError",
    "DEFAULT_REGISTRY",
    "DivisionByZero",
    "EXTENSION_OPERATORS",
    "EvalError",
    "LexError",
    "MalformedExpression",
    "MalformedNumber",
    "MalformedToken",
    "NonIntegerOperand",
    "OperatorRegistry",
    "OperatorSpec",
    "ParseError",
    "StackUnderflow",
    "Token",
    "TokenKind",
    "UndefinedResult",
    "UnknownOperator",
    "UnmatchedParenthesis",
    "calculate",
    "default_registry",
    "evaluate",
    "evaluate_postfix",
    "parse_to_postfix",
    "split_postfix",
    "to_postfix",
    "tokenize",
]
