"""Closure representation and argument binding for user-defined functions."""

from __future__ import annotations

from io import StringIO

from bsl import LispValue
from bsl.types.environment import Environment
from bsl.types.forms import Expr


class Closure:
    """A function value: parameter names, a body, and its defining environment.

    A top-level function captures the live top-level frame by reference, so
    definitions evaluated after it stay visible (forward and mutual
    recursion). Applying the closure never mutates `env`.
    """

    __slots__ = ("name", "params", "body", "env")

    def __init__(self, name: str, params: tuple[str, ...], body: Expr, env: Environment):
        self.name: str = name
        self.params: tuple[str, ...] = tuple(params)
        self.body: Expr = body
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(self.name)
            for p in self.params:
                buffer.write(" ")
                buffer.write(p)
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        # never print env: it may contain this closure
        return f"<Closure {self}>"

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the argument values to this closure's parameters in a new child
        frame of the captured environment. Arity is checked by the caller.
        """
        return self.env.extend(dict(zip(self.params, args)))
