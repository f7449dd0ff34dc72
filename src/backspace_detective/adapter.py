"""Boundary adapter between serialized requests and the analysis pipeline.

``analyze_editing_pattern`` is the single operation a host calls. It takes
the request as JSON text and always returns JSON text: either an analysis
result or an error envelope, never both, and it never raises.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from backspace_detective.classify import analyze
from backspace_detective.errors import DecodeError, EncodeError
from backspace_detective.models import (
    AnalysisOutcome,
    AnalysisResult,
    ErrorEnvelope,
    RawEditingStats,
)

logger = logging.getLogger(__name__)

DECODE_ERROR_MESSAGE = "Failed to parse editing stats"
ENCODE_ERROR_MESSAGE = "Failed to serialize analysis results"

_STATIC_ERROR_RESPONSE = f'{{"error":"{ENCODE_ERROR_MESSAGE}","is_error":true}}'


def decode_request(payload: str | bytes) -> RawEditingStats:
    """Decode a JSON request into RawEditingStats.

    Args:
        payload: UTF-8 JSON text holding the five counters.

    Returns:
        The validated counters.

    Raises:
        DecodeError: If the payload is not valid JSON, is not an object,
            misses a field, or carries a field of the wrong type.
    """
    try:
        return RawEditingStats.model_validate_json(payload)
    except ValidationError as exc:
        raise DecodeError(f"{exc.error_count()} invalid field(s) in request") from exc
    except TypeError as exc:
        raise DecodeError(f"Unsupported payload type: {type(payload).__name__}") from exc


def encode_result(result: AnalysisResult) -> str:
    """Serialize an AnalysisResult to JSON text.

    Raises:
        EncodeError: If the result cannot be serialized.
    """
    try:
        return result.model_dump_json()
    except (ValueError, TypeError) as exc:
        raise EncodeError(str(exc)) from exc


def handle_request(payload: str | bytes) -> AnalysisOutcome:
    """Decode a request and run the analysis pipeline on it.

    Args:
        payload: UTF-8 JSON text holding the five counters.

    Returns:
        An AnalysisResult on success, or an ErrorEnvelope when decoding
        fails. The pipeline is not run for undecodable requests.
    """
    try:
        stats = decode_request(payload)
    except DecodeError as exc:
        logger.warning("Rejected editing stats request: %s", exc)
        return ErrorEnvelope(error=DECODE_ERROR_MESSAGE)

    return analyze(stats)


def encode_outcome(outcome: AnalysisOutcome) -> str:
    """Serialize either variant of an outcome to JSON text.

    A result that fails to serialize is replaced by an error envelope.
    """
    if isinstance(outcome, AnalysisResult):
        try:
            return encode_result(outcome)
        except EncodeError as exc:
            logger.error("Could not serialize analysis result: %s", exc)
            outcome = ErrorEnvelope(error=ENCODE_ERROR_MESSAGE)

    try:
        return outcome.model_dump_json()
    except (ValueError, TypeError):
        logger.exception("Could not serialize error envelope")
        return _STATIC_ERROR_RESPONSE


def analyze_editing_pattern(request: str) -> str:
    """Analyze one editing session.

    Args:
        request: JSON object text with ``total_keystrokes``,
            ``backspace_count``, ``delete_count``, ``characters_typed`` and
            ``edit_duration_ms``.

    Returns:
        JSON text: the analysis result, or ``{"error": ..., "is_error": true}``.
    """
    return encode_outcome(handle_request(request))
