"""Metrics engine for editing sessions.

Turns raw keystroke counters into normalized ratios and a typing-speed
estimate. Every formula has a defined fallback for a zero denominator, so
none of these functions can fail on a validated RawEditingStats.
"""

from __future__ import annotations

from backspace_detective.models import DerivedMetrics, RawEditingStats

_MS_PER_MINUTE = 60000.0

# ---------------------------------------------------------------------------
# Keystroke ratios
# ---------------------------------------------------------------------------


def backspace_ratio(stats: RawEditingStats) -> float:
    """Return the share of keystrokes that were backspaces.

    Args:
        stats: The session counters.

    Returns:
        ``backspace_count / total_keystrokes``, or 0.0 with no keystrokes.
    """
    if stats.total_keystrokes == 0:
        return 0.0
    return stats.backspace_count / stats.total_keystrokes


def delete_ratio(stats: RawEditingStats) -> float:
    """Return the share of keystrokes that were forward deletes."""
    if stats.total_keystrokes == 0:
        return 0.0
    return stats.delete_count / stats.total_keystrokes


def correction_ratio(stats: RawEditingStats) -> float:
    """Return the share of keystrokes spent on any correction."""
    if stats.total_keystrokes == 0:
        return 0.0
    return (stats.backspace_count + stats.delete_count) / stats.total_keystrokes


# ---------------------------------------------------------------------------
# Speed and efficiency
# ---------------------------------------------------------------------------


def typing_speed(stats: RawEditingStats) -> float:
    """Return the typing speed in characters per minute.

    The duration is converted to fractional minutes, so sessions shorter
    than a minute are scaled up rather than truncated.

    Args:
        stats: The session counters.

    Returns:
        Characters per minute, or 0.0 when no time has elapsed.
    """
    if stats.edit_duration_ms == 0:
        return 0.0
    return stats.characters_typed / (stats.edit_duration_ms / _MS_PER_MINUTE)


def character_efficiency(stats: RawEditingStats) -> float:
    """Return the fraction of typed characters that were not corrected.

    The value is not clamped. When corrections outnumber typed characters
    it goes negative, and callers see that as-is.

    Args:
        stats: The session counters.

    Returns:
        ``(characters_typed - corrections) / characters_typed``, or 0.0
        when nothing was typed.
    """
    if stats.characters_typed == 0:
        return 0.0
    corrected = stats.backspace_count + stats.delete_count
    return (stats.characters_typed - corrected) / stats.characters_typed


# ---------------------------------------------------------------------------
# All metrics
# ---------------------------------------------------------------------------


def compute_metrics(stats: RawEditingStats) -> DerivedMetrics:
    """Compute every derived metric for a session.

    Args:
        stats: The session counters.

    Returns:
        A DerivedMetrics instance.
    """
    return DerivedMetrics(
        backspace_ratio=backspace_ratio(stats),
        delete_ratio=delete_ratio(stats),
        correction_ratio=correction_ratio(stats),
        typing_speed=typing_speed(stats),
        character_efficiency=character_efficiency(stats),
    )
