"""Fixed settings shared by the engine and the command-line front-end."""

import typing as t

# Maximum distance from the nearest whole number an operand of an
# integer-only operator may have.
INTEGER_TOLERANCE: t.Final[float] = 1e-9

# Every character that may appear in an operator symbol. This is a superset
# of the registered symbols: "~" and "!" are reserved and lex as operator
# characters, but no operator is bound to them.
OPERATOR_ALPHABET: t.Final[frozenset[str]] = frozenset("+-*/%^&|<>~!")

EXPONENT_MARKERS: t.Final[frozenset[str]] = frozenset("eE")
EXPONENT_SIGNS: t.Final[frozenset[str]] = frozenset("+-")

# Separator used when joining postfix token text for display.
POSTFIX_SEPARATOR: t.Final[str] = " "

# ----------------------- Front-end ---------------------------------------

PROMPT: t.Final[str] = "calc> "
CLEAR_COMMANDS: t.Final[frozenset[str]] = frozenset({"clear", "reset"})
LOG_FORMAT: t.Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
