"""Result — an outcome that is either ok or an error.

Shaped like a service result: an ``ok`` flag plus exactly one populated
side.  The renderers consume the :class:`ResultLike` protocol, so any
object exposing the same three methods is accepted.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, model_validator


@runtime_checkable
class ResultLike(Protocol):
    """Anything with a tag check and unchecked getters for both sides."""

    def is_error(self) -> bool: ...

    def unsafe_get_ok(self) -> Any: ...

    def unsafe_get_error(self) -> Any: ...


class Result(BaseModel):
    """Frozen ok/error outcome.

    Attributes:
        ok: Whether this is the ok side.
        value: Payload when ``ok`` is True.
        error: Payload when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    value: Any = None
    error: Any = None

    @model_validator(mode="after")
    def _one_side_only(self) -> Result:
        if self.ok and self.error is not None:
            msg = "an ok Result cannot carry an error"
            raise ValueError(msg)
        if not self.ok and self.value is not None:
            msg = "an error Result cannot carry a value"
            raise ValueError(msg)
        return self

    @classmethod
    def success(cls, value: Any) -> Result:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: Any) -> Result:
        return cls(ok=False, error=error)

    def is_error(self) -> bool:
        return not self.ok

    def unsafe_get_ok(self) -> Any:
        if not self.ok:
            msg = "Result is an error, not ok"
            raise ValueError(msg)
        return self.value

    def unsafe_get_error(self) -> Any:
        if self.ok:
            msg = "Result is ok, not an error"
            raise ValueError(msg)
        return self.error
