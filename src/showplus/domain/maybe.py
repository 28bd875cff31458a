"""Optional values: the ``Maybe`` protocol and its two carriers.

The renderers only need to ask "is it empty?" and "what is inside?".
Any object answering those two questions is accepted.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel


@runtime_checkable
class Maybe(Protocol):
    """Anything with an emptiness check and an unchecked payload getter."""

    def is_nothing(self) -> bool: ...

    def unsafe_get_just(self) -> Any: ...


class Just(BaseModel):
    """A present value."""

    model_config = {"frozen": True}

    value: Any

    def __init__(self, value: Any = None, /, **data: Any) -> None:
        if "value" not in data:
            data["value"] = value
        super().__init__(**data)

    def is_nothing(self) -> bool:
        return False

    def unsafe_get_just(self) -> Any:
        return self.value


class Nothing(BaseModel):
    """The absent value. Use the :data:`NOTHING` singleton."""

    model_config = {"frozen": True}

    def is_nothing(self) -> bool:
        return True

    def unsafe_get_just(self) -> Any:
        msg = "Nothing has no value"
        raise ValueError(msg)


NOTHING = Nothing()


def just(value: Any) -> Just:
    """Wrap *value* as present."""
    return Just(value)


def from_optional(value: Any) -> Just | Nothing:
    """Lift a plain Python optional: ``None`` becomes :data:`NOTHING`."""
    if value is None:
        return NOTHING
    return Just(value)
