"""Base typist class and session result types."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from backspace_detective.models import RawEditingStats

if TYPE_CHECKING:
    from tests.simulate.timing import TimingStrategy


class KeyKind(enum.StrEnum):
    """Kinds of edit a simulated host can observe."""

    CHAR = "char"
    BACKSPACE = "backspace"
    DELETE = "delete"
    PASTE = "paste"


@dataclass
class SimulatedKey:
    """Record of a single edit emitted by a typist."""

    kind: KeyKind
    text_length: int = 1
    delay_ms: float = 0.0


@dataclass
class TypingSession:
    """All edits from one simulated editing session."""

    profile_name: str
    keys: list[SimulatedKey] = field(default_factory=list)

    @property
    def duration_ms(self) -> int:
        """Return the elapsed session time in whole milliseconds."""
        return int(sum(key.delay_ms for key in self.keys))

    def to_stats(self) -> RawEditingStats:
        """Aggregate the session into counters.

        Every edit counts as one keystroke. A paste adds its full length
        to the typed characters, a plain key adds one, corrections add none.
        """
        counts = {kind: 0 for kind in KeyKind}
        characters = 0
        for key in self.keys:
            counts[key.kind] += 1
            if key.kind in (KeyKind.CHAR, KeyKind.PASTE):
                characters += key.text_length

        return RawEditingStats(
            total_keystrokes=len(self.keys),
            backspace_count=counts[KeyKind.BACKSPACE],
            delete_count=counts[KeyKind.DELETE],
            characters_typed=characters,
            edit_duration_ms=self.duration_ms,
        )


class BaseTypist(abc.ABC):
    """Abstract base for all typist profiles.

    Subclasses implement generate_keys() to produce the edit sequence
    characteristic of their actor type. The base class applies timing
    and collects the session.
    """

    def __init__(self, timing: TimingStrategy, profile_name: str) -> None:
        self._timing = timing
        self._profile_name = profile_name

    @property
    def profile_name(self) -> str:
        """Return the registry name of this profile."""
        return self._profile_name

    @abc.abstractmethod
    def generate_keys(self) -> list[SimulatedKey]:
        """Generate the ordered list of edits, without delays.

        Returns:
            Ordered list of SimulatedKey records.
        """

    def run(self) -> TypingSession:
        """Generate the edits and assign each one its delay.

        Returns:
            A TypingSession with every edit and its timing.
        """
        session = TypingSession(profile_name=self._profile_name)
        for key in self.generate_keys():
            key.delay_ms = self._timing.delay_before(key)
            session.keys.append(key)
        return session
