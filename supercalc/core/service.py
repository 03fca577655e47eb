"""Boundary between the HTTP layer and the projection engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from supercalc.core.errors import ProjectionValidationError
from supercalc.core.superannuation import project
from supercalc.models import ProjectionRequest, ProjectionResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    is_success: bool
    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "ServiceResult[T]":
        return cls(is_success=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "ServiceResult[T]":
        return cls(is_success=False, error=error)


def calculate_projection(request: ProjectionRequest) -> ServiceResult[ProjectionResult]:
    """Run a projection, turning validation errors into a failed result.

    Only ProjectionValidationError is translated; anything else is an internal
    fault and propagates to the caller.
    """
    try:
        result = project(request)
    except ProjectionValidationError as exc:
        logger.warning(
            "Projection rejected (%s) for age %s to %s: %s",
            exc.code,
            request.current_age,
            request.retirement_age,
            exc.message,
        )
        return ServiceResult.failure(exc.message)

    logger.info(
        "Projection calculated for age %s to %s, final balance: %.2f",
        request.current_age,
        request.retirement_age,
        result.final_balance,
    )
    return ServiceResult.success(result)
