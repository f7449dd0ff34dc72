"""Simulator profiles for different typist types."""

from __future__ import annotations

from tests.simulate.profiles.human_typist import HumanTypistSimulator
from tests.simulate.profiles.paste_agent import PasteAgentSimulator
from tests.simulate.profiles.scripted_typist import ScriptedTypistSimulator

__all__ = [
    "HumanTypistSimulator",
    "PasteAgentSimulator",
    "ScriptedTypistSimulator",
]

PROFILE_REGISTRY: dict[str, type] = {
    "human_typist": HumanTypistSimulator,
    "scripted_typist": ScriptedTypistSimulator,
    "paste_agent": PasteAgentSimulator,
}
