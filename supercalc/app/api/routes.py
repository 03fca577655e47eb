"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from supercalc.core.health import get_health_status
from supercalc.core.scenarios import list_scenarios
from supercalc.core.service import calculate_projection
from supercalc.models import ProjectionRequest
from supercalc.schemas.projection import (
    HealthResponse,
    ProjectionResponse,
    ProjectionResultOut,
    ScenarioOut,
    ScenarioQuery,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

PROJECTION_ERROR_MESSAGE = "An error occurred calculating your projection"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(Exception)
def _handle_unexpected_error(exc: Exception):
    """Log internal faults and hide their details from the caller."""
    if isinstance(exc, HTTPException):
        return exc
    logger.exception("Unhandled error serving %s", request.path)
    if request.endpoint == "api.calculate":
        body = ProjectionResponse(is_success=False, error=PROJECTION_ERROR_MESSAGE)
        return jsonify(body.model_dump(by_alias=True)), HTTPStatus.INTERNAL_SERVER_ERROR
    return jsonify({"error": UNEXPECTED_ERROR_MESSAGE}), HTTPStatus.INTERNAL_SERVER_ERROR


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = HealthResponse.model_validate(get_health_status())
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/projection/calculate")
def calculate() -> Any:
    """Run a projection; domain validation failures come back as 400."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ProjectionRequest.model_validate(raw_payload)
    result = calculate_projection(payload)

    response = ProjectionResponse(
        is_success=result.is_success,
        value=(
            ProjectionResultOut.from_result(result.value, payload.current_balance)
            if result.value is not None
            else None
        ),
        error=result.error,
    )
    status = HTTPStatus.OK if result.is_success else HTTPStatus.BAD_REQUEST
    return jsonify(response.model_dump(by_alias=True)), status


@api_bp.get("/projection/scenarios")
def scenarios() -> Any:
    """Investment presets with an illustrative balance at retirement."""
    settings = current_app.config["SUPERCALC_SETTINGS"]
    query = ScenarioQuery.model_validate(request.args.to_dict())

    rows = list_scenarios(query.age, query.balance, settings.DEFAULT_RETIREMENT_AGE)
    return jsonify(
        [ScenarioOut.model_validate(row.model_dump()).model_dump(by_alias=True) for row in rows]
    )
