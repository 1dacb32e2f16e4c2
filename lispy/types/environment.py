"""Runtime environment for Lispy.

The Environment stores bindings of Symbols to values in insertion order and
supports nested scopes via a `parent` link. The parent is a plain reference,
not owned: it is set when a closure is applied and points at the caller's
environment for the duration of that call.
"""

from __future__ import annotations

from io import StringIO
from typing import Any, Optional

from lispy.errors import LispyInvalidSymbol, LispyUnboundSymbol
from lispy.types.symbol import Symbol


class Environment:
    """Ordered mapping from Symbols to values with an optional parent scope."""

    __slots__ = ("vars", "parent")

    def __init__(self, parent: Optional[Environment] = None):
        self.vars: dict[Symbol, Any] = {}
        self.parent: Environment | None = parent

    def root(self) -> Environment:
        """Follow parent links to the unique parentless environment."""
        env = self
        while env.parent is not None:
            env = env.parent
        return env

    def get(self, name: Symbol) -> Any:
        """Return a copy of the value bound to `name`.

        Searches this frame first, then each parent in turn.
        Raises LispyUnboundSymbol if no frame binds it.
        """
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env.vars[name].copy()
            env = env.parent
        raise LispyUnboundSymbol(str(name))

    def put(self, name: Symbol, value: Any) -> None:
        """Bind a copy of `value` to `name` in this frame only.

        Raises LispyInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispyInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value.copy()

    def define(self, name: Symbol, value: Any) -> None:
        """Bind `name` in the root environment, however deep this frame is."""
        self.root().put(name, value)

    def update(self, mapping: dict[Symbol, Any]) -> None:
        """Bulk-put a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.put(k, v)

    def copy(self) -> Environment:
        """Copy the name table and every bound value; the parent link is shared."""
        env = Environment(self.parent)
        env.vars = {k: v.copy() for k, v in self.vars.items()}
        return env

    def __contains__(self, name: Symbol) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                with StringIO() as frame:
                    env._write_vars(frame)
                    chain.append(frame.getvalue())
                env = env.parent
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
