"""Shared enums for progress and presentation."""

from __future__ import annotations

from enum import StrEnum


class ProgressStage(StrEnum):
    NOT_READY = "not_ready"
    READY = "ready"
    DECIDED = "decided"


class Screen(StrEnum):
    HOME = "home"
    INTERVIEWS = "interviews"
    COMPANION = "companion"
    CLUES = "clues"
    FINAL = "final"


SCREEN_LABELS = {
    Screen.HOME: "Expediente",
    Screen.INTERVIEWS: "Entrevistas",
    Screen.COMPANION: "Compañero",
    Screen.CLUES: "Pistas",
    Screen.FINAL: "Decisión",
}
