"""Errors raised by the cost calculators.

All of them are local, synchronous precondition failures: nothing is
retried and no partially populated breakdown is ever returned.
"""

from __future__ import annotations

from collections.abc import Iterable


class CostEngineError(Exception):
    """Base class for calculation errors."""


class InvalidRoleError(CostEngineError):
    """Raised when a role is not part of the closed role set."""

    def __init__(self, role: object, valid_roles: Iterable[str]):
        self.role = role
        self.valid_roles = list(valid_roles)
        super().__init__(
            f"Role '{role}' does not exist. Valid roles: {', '.join(self.valid_roles)}"
        )


class InvalidInputError(CostEngineError):
    """Raised for negative, NaN or non-numeric calculator inputs."""

    def __init__(self, field: str, value: object, reason: str | None = None):
        self.field = field
        self.value = value
        self.reason = reason
        msg = f"Invalid value for '{field}': {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class ConfigurationError(CostEngineError):
    """Raised when a salary configuration is structurally invalid."""

    def __init__(self, message: str, fields: Iterable[str] | None = None):
        self.fields = list(fields) if fields else []
        super().__init__(message)
