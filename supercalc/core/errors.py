"""Validation errors raised by the projection engine."""

from __future__ import annotations


class ProjectionValidationError(ValueError):
    """Base class for caller-input errors detected before a projection runs."""

    code = "ProjectionValidationError"
    message = "Invalid projection request"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class InvalidAgeOrdering(ProjectionValidationError):
    code = "InvalidAgeOrdering"
    message = "Retirement age must be greater than current age"


class CurrentAgeOutOfRange(ProjectionValidationError):
    code = "CurrentAgeOutOfRange"
    message = "Current age must be between 18 and 100"


class RetirementAgeOutOfRange(ProjectionValidationError):
    code = "RetirementAgeOutOfRange"
    message = "Retirement age must be between 55 and 100"


class NegativeBalance(ProjectionValidationError):
    code = "NegativeBalance"
    message = "Current balance cannot be negative"


class NonPositiveSalary(ProjectionValidationError):
    code = "NonPositiveSalary"
    message = "Annual salary must be greater than zero"


__all__ = [
    "ProjectionValidationError",
    "InvalidAgeOrdering",
    "CurrentAgeOutOfRange",
    "RetirementAgeOutOfRange",
    "NegativeBalance",
    "NonPositiveSalary",
]
