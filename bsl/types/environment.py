"""Runtime environment for bsl.

An Environment maps identifiers to slots. A slot holds either `Nothing` (the
name is reserved by the pre-bind pass but its definition has not been
evaluated yet) or an ExprResult. Frames nest through an `outer` link: the
single top-level frame is mutated in place, once to reserve each defined name
and once to fill it, while function application always builds a fresh child
frame so a captured environment is never changed by a call.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from bsl import LispValue
from bsl.errors import BslInvariantError
from bsl.types.nothing import Nothing


class Environment:
    """Hierarchical mapping from identifiers to Maybe<ExprResult> slots."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        # insertion-ordered: reservation order is source order
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: LispValue) -> None:
        """Bind `name` in this frame, replacing whatever the frame held."""
        if not isinstance(name, str):
            raise BslInvariantError(f"Cannot define {name!r} as an identifier")
        self.vars[name] = value

    def reserve(self, name: str) -> None:
        """Mark `name` as defined later in the program."""
        self.define(name, Nothing)

    def fill(self, name: str, value: LispValue) -> bool:
        """Fill a reserved slot exactly once.

        Returns False when the slot is already filled, which the caller
        reports as a repeated definition. A slot that was never reserved is
        an invariant violation of the pre-bind pass.
        """
        if name not in self.vars:
            raise BslInvariantError(
                f"{name} was not reserved before its definition was evaluated"
            )
        if self.vars[name] is not Nothing:
            return False
        self.vars[name] = value
        return True

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> Optional[LispValue]:
        """Return the slot bound to `name`: a value, an error, `Nothing`,
        or None when the name is not in any frame."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def extend(self, bindings: dict[str, LispValue]) -> Environment:
        """Return a child frame holding `bindings`; this frame is untouched."""
        child = Environment(outer=self)
        for k, v in bindings.items():
            child.define(k, v)
        return child

    def update(self, mapping: dict[str, LispValue]) -> None:
        """Bulk-define a mapping of identifier -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def reserved(self) -> list[str]:
        """Names in this frame still waiting for their definition to fill them."""
        return [name for name, slot in self.vars.items() if slot is Nothing]

    def _write_frame(self, buffer: StringIO) -> None:
        buffer.write(f"<Environment {len(self.vars)} slots")
        pending = self.reserved()
        if pending:
            buffer.write(f", reserved: {' '.join(pending)}")
        buffer.write(">")

    def __repr__(self) -> str:
        """Frame chain, innermost first, naming every slot not yet filled."""
        with StringIO() as buffer:
            env: Optional[Environment] = self
            while env is not None:
                env._write_frame(buffer)
                env = env.outer
                if env is not None:
                    buffer.write(" -> ")
            return buffer.getvalue()
