"""A small typed stack used for both the operator and the operand stack."""

import typing as t

T = t.TypeVar("T")


# Wrapping the list keeps the [-1] indexing out of the converter and the
# evaluator, and makes the push/pop intent explicit at each call site.
class Stack(t.Generic[T]):
    """Last-in first-out container scoped to a single parse or evaluation."""

    __slots__ = ("_array",)

    def __init__(self) -> None:
        """Initialize the backing array."""
        self._array: t.Final[list[T]] = []

    def push(self, item: T, /) -> None:
        """Push to the stack."""
        self._array.append(item)

    def pop(self) -> T:
        """Pop from the stack.

        Raises:
            IndexError: If the stack is empty. Callers check ``len`` first
            so they can raise the error that fits their context.

        """
        return self._array.pop()

    def back(self) -> T:
        """Peek at the last element in the stack."""
        return self._array[-1]

    def empty(self) -> bool:
        """Return True if the stack is empty."""
        return not len(self)

    def __len__(self) -> int:
        """Return the size of the stack."""
        return len(self._array)

    def __repr__(self) -> str:
        return f"Stack({self._array!r})"
