"""Editing-pattern classification based on backspace usage and typing speed.

Rules run in two passes. The first pass looks only at the backspace ratio:
  - < 0.05      -> AI
  - 0.05-0.08   -> no verdict (neutral band)
  - > 0.08      -> Human
The second pass combines speed with the ratio and may overwrite the first:
  - > 600 cpm with ratio < 0.07 -> AI
  - < 300 cpm with ratio > 0.1  -> Human
Confidence starts at 0.5 and always ends in [0.5, 0.95].
"""

from __future__ import annotations

import logging

from backspace_detective.metrics import compute_metrics
from backspace_detective.models import (
    AnalysisResult,
    DerivedMetrics,
    EditingMetrics,
    Prediction,
    RawEditingStats,
    Verdict,
)

logger = logging.getLogger(__name__)

_BASE_CONFIDENCE = 0.5
_MIN_CONFIDENCE = 0.5
_MAX_CONFIDENCE = 0.95

# First pass: backspace ratio
_AI_RATIO = 0.05
_HUMAN_RATIO = 0.08
_HEAVY_HUMAN_RATIO = 0.15
_AI_FAST_SPEED = 400.0

# Second pass: speed combined with ratio
_AI_OVERRIDE_SPEED = 600.0
_AI_OVERRIDE_RATIO = 0.07
_AI_OVERRIDE_CONFIDENCE = 0.8
_HUMAN_OVERRIDE_SPEED = 300.0
_HUMAN_OVERRIDE_RATIO = 0.1
_HUMAN_OVERRIDE_CONFIDENCE = 0.7

# Pattern tags
FREQUENT_CORRECTIONS = "Frequent corrections"
VERY_FAST_TYPING = "Very fast typing"
LOW_EFFICIENCY = "Low efficiency"

_FREQUENT_CORRECTIONS_RATIO = 0.2
_VERY_FAST_SPEED = 500.0
_LOW_EFFICIENCY = 0.7


def classify(metrics: DerivedMetrics) -> Verdict:
    """Classify an editing session from its derived metrics.

    Args:
        metrics: Ratios and speed computed by the metrics engine.

    Returns:
        A Verdict with the prediction and a confidence in [0.5, 0.95].
    """
    ratio = metrics.backspace_ratio
    speed = metrics.typing_speed

    confidence = _BASE_CONFIDENCE
    prediction = Prediction.UNKNOWN

    if ratio < _AI_RATIO:
        confidence += 0.3
        if speed > _AI_FAST_SPEED:
            confidence += 0.2
        prediction = Prediction.AI
    elif ratio > _HUMAN_RATIO:
        confidence += 0.2
        if ratio > _HEAVY_HUMAN_RATIO:
            confidence += 0.1
        prediction = Prediction.HUMAN

    # Runs regardless of the first pass and can flip its verdict
    if speed > _AI_OVERRIDE_SPEED and ratio < _AI_OVERRIDE_RATIO:
        confidence = max(confidence, _AI_OVERRIDE_CONFIDENCE)
        prediction = Prediction.AI
    elif speed < _HUMAN_OVERRIDE_SPEED and ratio > _HUMAN_OVERRIDE_RATIO:
        confidence = max(confidence, _HUMAN_OVERRIDE_CONFIDENCE)
        prediction = Prediction.HUMAN

    confidence = max(min(confidence, _MAX_CONFIDENCE), _MIN_CONFIDENCE)

    return Verdict(prediction=prediction, confidence=confidence)


def detect_patterns(metrics: DerivedMetrics) -> list[str]:
    """Return qualitative tags describing the session.

    Tags are checked in a fixed order, so the result is stable for a given
    set of metrics and never holds duplicates.

    Args:
        metrics: Ratios and speed computed by the metrics engine.

    Returns:
        Zero to three tags.
    """
    patterns: list[str] = []
    if metrics.backspace_ratio > _FREQUENT_CORRECTIONS_RATIO:
        patterns.append(FREQUENT_CORRECTIONS)
    if metrics.typing_speed > _VERY_FAST_SPEED:
        patterns.append(VERY_FAST_TYPING)
    if metrics.character_efficiency < _LOW_EFFICIENCY:
        patterns.append(LOW_EFFICIENCY)
    return patterns


def _is_empty(stats: RawEditingStats) -> bool:
    return not (
        stats.total_keystrokes
        or stats.backspace_count
        or stats.delete_count
        or stats.characters_typed
        or stats.edit_duration_ms
    )


def analyze(stats: RawEditingStats) -> AnalysisResult:
    """Run the metrics engine and classifier over one session.

    An empty session (every counter zero) skips the rules and pattern tags
    and is reported as Unknown at neutral confidence. Any other session,
    including one with characters but no counted keystrokes, goes through
    the rules.

    Args:
        stats: Validated session counters.

    Returns:
        A fully populated AnalysisResult.
    """
    metrics = compute_metrics(stats)

    if _is_empty(stats):
        verdict = Verdict()
        patterns: list[str] = []
    else:
        verdict = classify(metrics)
        patterns = detect_patterns(metrics)

    result = AnalysisResult(
        prediction=verdict.prediction,
        confidence=verdict.confidence,
        backspace_ratio=metrics.backspace_ratio,
        typing_speed=metrics.typing_speed,
        metrics=EditingMetrics(
            correction_frequency=metrics.correction_ratio,
            character_efficiency=metrics.character_efficiency,
            correction_patterns=patterns,
        ),
    )
    logger.debug(
        "Classified session as %s (confidence %.2f, ratio %.3f, %.1f cpm)",
        result.prediction.value,
        result.confidence,
        result.backspace_ratio,
        result.typing_speed,
    )
    return result
