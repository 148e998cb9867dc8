"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from wealthcalc.core.formatting import format_currency, to_words
from wealthcalc.core.insights import InsightUnavailable, fetch_insight
from wealthcalc.core.ping import build_ping_response
from wealthcalc.core.projection import project
from wealthcalc.schemas.formatting import CurrencyFormatRequest, CurrencyFormatResponse
from wealthcalc.schemas.projection import InvestmentInput

api_bp = Blueprint("api", __name__)


def _json_body() -> Dict[str, Any]:
    """Request JSON as a dict; an empty body counts as ``{}``."""
    if not request.get_data():
        return {}
    payload = request.get_json(force=True, silent=False)
    if not isinstance(payload, dict):
        raise BadRequest("request body must be a JSON object")
    return payload


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    errors = exc.errors(include_url=False, include_context=False, include_input=False)
    return jsonify({"detail": errors}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(InsightUnavailable)
def _handle_insight_unavailable(exc: InsightUnavailable):
    return jsonify({"detail": "insight unavailable"}), HTTPStatus.SERVICE_UNAVAILABLE


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(build_ping_response().model_dump())


@api_bp.get("/calc/defaults")
def defaults() -> Any:
    """Inputs the calculator starts from."""
    return jsonify(InvestmentInput().model_dump(mode="json", by_alias=True))


@api_bp.post("/calc/projection")
def projection() -> Any:
    """Year-by-year growth and summary totals for one set of inputs."""
    inputs = InvestmentInput.model_validate(_json_body())
    result = project(inputs)
    return jsonify(result.model_dump(mode="json", by_alias=True))


@api_bp.post("/format/currency")
def currency() -> Any:
    payload = CurrencyFormatRequest.model_validate(_json_body())
    response = CurrencyFormatResponse(
        formatted=format_currency(payload.value),
        words=to_words(payload.value),
    )
    return jsonify(response.model_dump())


@api_bp.post("/insights")
def insights() -> Any:
    """Narrative analysis of a plan; 503 when no provider can answer."""
    inputs = InvestmentInput.model_validate(_json_body())
    result = project(inputs)
    insight = fetch_insight(current_app.config.get("INSIGHT_PROVIDER"), inputs, result)
    return jsonify(insight.model_dump(by_alias=True))
