"""Core data models for Backspace Detective."""

from __future__ import annotations

import enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# Counters are unsigned 32-bit, the duration unsigned 64-bit
MAX_COUNT = 2**32 - 1
MAX_DURATION_MS = 2**64 - 1


class Prediction(enum.StrEnum):
    """Who most likely produced an editing session."""

    AI = "AI"
    HUMAN = "Human"
    UNKNOWN = "Unknown"


class RawEditingStats(BaseModel):
    """Aggregated keystroke counters for one editing session.

    The host owns capture and timing; this model only carries the totals.
    Counts are expected to satisfy
    ``backspace_count + delete_count <= total_keystrokes``, but that is not
    validated and the metrics pass violations straight through.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    total_keystrokes: int = Field(ge=0, le=MAX_COUNT, description="All key events in the session")
    backspace_count: int = Field(ge=0, le=MAX_COUNT, description="Backspace key events")
    delete_count: int = Field(ge=0, le=MAX_COUNT, description="Forward-delete key events")
    characters_typed: int = Field(
        ge=0, le=MAX_COUNT, description="Characters that reached the buffer"
    )
    edit_duration_ms: int = Field(
        ge=0, le=MAX_DURATION_MS, description="Elapsed session time in milliseconds"
    )


class DerivedMetrics(BaseModel):
    """Normalized ratios and typing speed computed from RawEditingStats."""

    model_config = ConfigDict(frozen=True)

    backspace_ratio: float
    delete_ratio: float
    correction_ratio: float
    typing_speed: float = Field(description="Characters per minute")
    character_efficiency: float = Field(
        description="Share of typed characters left uncorrected; unclamped"
    )


class Verdict(BaseModel):
    """Prediction and confidence produced by the classifier rules."""

    model_config = ConfigDict(frozen=True)

    prediction: Prediction = Prediction.UNKNOWN
    confidence: float = Field(default=0.5, ge=0.5, le=0.95)


class EditingMetrics(BaseModel):
    """Secondary metrics reported alongside a prediction."""

    model_config = ConfigDict(frozen=True)

    correction_frequency: float
    character_efficiency: float
    correction_patterns: list[str] = Field(
        default_factory=list,
        description="Qualitative tags in evaluation order",
    )


class AnalysisResult(BaseModel):
    """Successful analysis of one editing session."""

    model_config = ConfigDict(frozen=True)

    prediction: Prediction
    confidence: float = Field(ge=0.5, le=0.95)
    backspace_ratio: float
    typing_speed: float
    metrics: EditingMetrics


class ErrorEnvelope(BaseModel):
    """Error response returned in place of an AnalysisResult."""

    model_config = ConfigDict(frozen=True)

    error: str
    is_error: Literal[True] = True


AnalysisOutcome = AnalysisResult | ErrorEnvelope
