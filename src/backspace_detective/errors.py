"""Exceptions raised at the Backspace Detective boundary."""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class for failures while handling an analysis request."""


class DecodeError(AnalysisError):
    """The request payload could not be decoded into RawEditingStats."""


class EncodeError(AnalysisError):
    """An analysis result could not be serialized for the caller."""
