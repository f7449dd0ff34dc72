"""Typing simulator for Backspace Detective testing.

This package provides seeded typist profiles that emit synthetic key
events the way an editor host would observe them: a human typist who
corrects as they go, a scripted auto-typer, and an agent that inserts
generated text in chunks. Each run aggregates its events into
RawEditingStats for the analysis pipeline.

Run the simulator directly via:
    python -m tests.simulate --profile human_typist
"""
