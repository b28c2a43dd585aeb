"""Text projections of each screen over the case and its progress."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from casefile.domain.enums import Screen
from casefile.investigation.progress import ProgressController
from casefile.investigation.thresholds import CLUE_UNLOCK_INTERVIEWS

DEFAULT_OBJECTIVE = "Objetivo: entrevistar, destrabar la pista y decidir cómo cerrar el caso."
DIVIDER = "─" * 24


@dataclass(frozen=True)
class ScreenView:
    screen: Screen
    title: str
    lines: list[str] = field(default_factory=list)
    hints: list[str] = field(default_factory=list)


def _quote(text: str) -> str:
    return f"“{text}”"


def home_view(controller: ProgressController) -> ScreenView:
    case = controller.case
    objective = case.objective or DEFAULT_OBJECTIVE
    return ScreenView(
        screen=Screen.HOME,
        title=case.title,
        lines=[f"Víctima: {case.victim}", case.summary, DIVIDER, objective],
    )


def interviews_view(controller: ProgressController) -> ScreenView:
    lines: list[str] = []
    for index, entry in enumerate(controller.case.interviews, start=1):
        done = controller.is_interviewed(entry.id)
        status = "[Entrevistado]" if done else f"[Marcar entrevista: e {index}]"
        lines.extend(
            [
                f"{index}) {entry.name}  {status}",
                f"   {_quote(entry.line)}",
                f"   Observación: {entry.observation}",
            ]
        )
    if not lines:
        lines.append("No hay personas para entrevistar.")
    hints = [f"Entrevistas: {controller.interview_count()}/{len(controller.case.interviews)}"]
    return ScreenView(screen=Screen.INTERVIEWS, title="Entrevistas", lines=lines, hints=hints)


def companion_view(controller: ProgressController) -> ScreenView:
    lines = [f"• {line}" for line in controller.case.companion_lines]
    return ScreenView(screen=Screen.COMPANION, title="Chat con tu compañero", lines=lines)


def clues_view(controller: ProgressController) -> ScreenView:
    case = controller.case
    if not controller.is_clue_unlocked():
        gate = controller.gate()
        return ScreenView(
            screen=Screen.CLUES,
            title="Pistas",
            lines=[
                f"Entrevistá al menos a {CLUE_UNLOCK_INTERVIEWS} personas "
                "para destrabar la pista principal."
            ],
            hints=gate.explanation,
        )
    lines = ["Pista principal:", _quote(case.clue)]
    if case.twist:
        lines.extend([DIVIDER, case.twist])
    return ScreenView(screen=Screen.CLUES, title="Pistas", lines=lines)


def final_view(controller: ProgressController) -> ScreenView:
    if not controller.is_final_decision_allowed():
        return ScreenView(
            screen=Screen.FINAL,
            title="Decisión final",
            lines=[f"Antes, entrevistá al menos a {CLUE_UNLOCK_INTERVIEWS} personas."],
            hints=controller.gate().explanation,
        )
    decision = controller.current_decision()
    lines: list[str] = []
    for index, choice in enumerate(controller.case.final_choices, start=1):
        if decision is None:
            lines.append(f"{index}) {choice.label}  [d {index}]")
        else:
            lines.append(f"{index}) {choice.label}")
    hints: list[str] = []
    if decision is None:
        hints.append("La decisión es definitiva.")
    else:
        lines.extend(
            [
                DIVIDER,
                f"Elegiste: {decision.label}",
                controller.resolution_text(decision.id),
            ]
        )
    return ScreenView(screen=Screen.FINAL, title="Decisión final", lines=lines, hints=hints)


SCREEN_BUILDERS: dict[Screen, Callable[[ProgressController], ScreenView]] = {
    Screen.HOME: home_view,
    Screen.INTERVIEWS: interviews_view,
    Screen.COMPANION: companion_view,
    Screen.CLUES: clues_view,
    Screen.FINAL: final_view,
}


def render_screen(screen: Screen, controller: ProgressController) -> ScreenView:
    return SCREEN_BUILDERS[screen](controller)


def format_view(view: ScreenView) -> str:
    parts = [view.title, *view.lines]
    if view.hints:
        parts.append("")
        parts.extend(view.hints)
    return "\n".join(parts)
