"""Shared error types.

The goal is to make errors explicit and easy to handle at the command boundary.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class AppError(Exception):
    """Base error for application-level failures."""

    message: str
    cause: Exception | None = None

    def __str__(self) -> str:  # pragma: no cover
        if self.cause is None:
            return self.message
        return f"{self.message} (cause: {self.cause})"

    @property
    def kind(self) -> str:
        return type(self).__name__


class ValidationError(AppError):
    """Invalid payload or value at a boundary."""


class InfrastructureError(AppError):
    """IO/OS/FS failures."""


class StateNotManagedError(AppError):
    """Requested managed state was never registered (lifecycle/programming error)."""


class CommandNotFoundError(AppError):
    """No command registered under the requested name."""
