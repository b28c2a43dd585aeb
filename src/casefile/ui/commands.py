"""Command parsing shared by the terminal front ends."""

from __future__ import annotations

from dataclasses import dataclass

from casefile.domain.enums import SCREEN_LABELS, Screen
from casefile.investigation.progress import ProgressController

SCREEN_ORDER = list(Screen)


@dataclass
class Session:
    controller: ProgressController
    screen: Screen = Screen.HOME


@dataclass
class CommandResult:
    message: str | None = None
    quit: bool = False


def menu_text(active: Screen | None = None) -> str:
    tabs = []
    for idx, screen in enumerate(SCREEN_ORDER, start=1):
        label = SCREEN_LABELS[screen]
        tabs.append(f"[{idx}) {label}]" if screen == active else f"{idx}) {label}")
    return (
        "  ".join(tabs)
        + "\ne N: marcar entrevista N  d N: elegir decisión N  q: salir"
    )


def parse_choice(value: str, count: int) -> int | None:
    if not value.isdecimal():
        return None
    index = int(value) - 1
    if index < 0 or index >= count:
        return None
    return index


def _mark_interview(session: Session, value: str) -> CommandResult:
    interviews = session.controller.case.interviews
    index = parse_choice(value, len(interviews))
    if index is None:
        return CommandResult("Entrevista inválida.")
    entry = interviews[index]
    session.screen = Screen.INTERVIEWS
    if session.controller.is_interviewed(entry.id):
        return CommandResult(f"{entry.name} ya fue entrevistado.")
    was_unlocked = session.controller.is_clue_unlocked()
    session.controller.record_interview(entry.id)
    message = f"Entrevistaste a {entry.name}."
    if not was_unlocked and session.controller.is_clue_unlocked():
        message = f"{message} La pista está disponible."
    return CommandResult(message)


def _choose_decision(session: Session, value: str) -> CommandResult:
    controller = session.controller
    session.screen = Screen.FINAL
    if not controller.is_final_decision_allowed():
        return CommandResult(controller.gate().explanation[0])
    if controller.current_decision() is not None:
        return CommandResult("La decisión ya fue tomada.")
    choices = controller.case.final_choices
    index = parse_choice(value, len(choices))
    if index is None:
        return CommandResult("Decisión inválida.")
    choice = choices[index]
    controller.record_decision(choice.id)
    return CommandResult(f"Elegiste: {choice.label}")


def handle_command(session: Session, value: str) -> CommandResult:
    value = value.strip()
    if not value:
        return CommandResult()
    if value.lower() == "q":
        return CommandResult(quit=True)
    index = parse_choice(value, len(SCREEN_ORDER))
    if index is not None:
        session.screen = SCREEN_ORDER[index]
        return CommandResult()
    verb, _, arg = value.partition(" ")
    verb = verb.lower()
    if verb == "e":
        return _mark_interview(session, arg.strip())
    if verb == "d":
        return _choose_decision(session, arg.strip())
    return CommandResult("Comando desconocido.")
