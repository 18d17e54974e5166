"""The two stacks and the operations that move numbers between them."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Optional, TextIO

from pushswap.printf import printf

_NAMES = ("a", "b")


class Stacks:
    """Stacks ``a`` and ``b``, top first, writing each operation's name to ``out``."""

    def __init__(
        self,
        a: Iterable[int] = (),
        b: Iterable[int] = (),
        out: Optional[TextIO] = None,
    ) -> None:
        self._stacks: dict[str, Deque[int]] = {"a": deque(a), "b": deque(b)}
        self._out = out

    @property
    def a(self) -> list[int]:
        """Contents of stack a, top first."""
        return list(self._stacks["a"])

    @property
    def b(self) -> list[int]:
        """Contents of stack b, top first."""
        return list(self._stacks["b"])

    def _stack(self, name: str) -> Deque[int]:
        if name not in _NAMES:
            raise ValueError(f"stack name must be 'a' or 'b', got {name!r}")
        return self._stacks[name]

    def _emit(self, operation: str) -> None:
        printf(operation + "\n", out=self._out)

    @staticmethod
    def _swap(stack: Deque[int]) -> bool:
        if len(stack) < 2:
            return False
        first = stack.popleft()
        stack.insert(1, first)
        return True

    @staticmethod
    def _rotate(stack: Deque[int]) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(-1)
        return True

    @staticmethod
    def _reverse_rotate(stack: Deque[int]) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(1)
        return True

    def swap(self, name: str) -> None:
        """Exchange the top two numbers of one stack."""
        if self._swap(self._stack(name)):
            self._emit("s" + name)

    def swap_both(self) -> None:
        """Swap the tops of both stacks."""
        self._swap(self._stacks["a"])
        self._swap(self._stacks["b"])
        self._emit("ss")

    def push(self, name: str) -> None:
        """Move the top of the other stack onto stack ``name``."""
        target = self._stack(name)
        source = self._stacks["b" if name == "a" else "a"]
        if not source:
            return
        target.appendleft(source.popleft())
        self._emit("p" + name)

    def rotate(self, name: str) -> None:
        """Move the top of one stack to its bottom."""
        if self._rotate(self._stack(name)):
            self._emit("r" + name)

    def rotate_both(self) -> None:
        """Rotate both stacks."""
        self._rotate(self._stacks["a"])
        self._rotate(self._stacks["b"])
        self._emit("rr")

    def reverse_rotate(self, name: str) -> None:
        """Move the bottom of one stack to its top."""
        if self._reverse_rotate(self._stack(name)):
            self._emit("rr" + name)

    def reverse_rotate_both(self) -> None:
        """Reverse-rotate both stacks."""
        self._reverse_rotate(self._stacks["a"])
        self._reverse_rotate(self._stacks["b"])
        self._emit("rrr")