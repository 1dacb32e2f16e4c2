from __future__ import annotations

from dataclasses import dataclass

from lispy.errors import ErrorKind


@dataclass(frozen=True, eq=False)
class LispError:
    """First-class error value.

    Keeps the error kind and its raw fields; the message is only formatted
    when the value is rendered or compared.
    """

    kind: ErrorKind
    fields: tuple = ()

    type_name = "Error"

    @classmethod
    def of(cls, kind: ErrorKind, *fields: object) -> LispError:
        return cls(kind, fields)

    @property
    def message(self) -> str:
        return self.kind.format(*self.fields)

    def copy(self) -> LispError:
        return self

    def __eq__(self, other: object) -> bool:
        # errors compare by their text, whatever kind produced it
        if not isinstance(other, LispError):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)

    def __str__(self) -> str:
        return f"Error: {self.message}"
