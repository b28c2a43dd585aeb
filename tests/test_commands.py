"""Command handling shared by the terminal front ends."""

from __future__ import annotations

import pytest

from casefile.domain.enums import Screen
from casefile.ui.commands import Session, handle_command, menu_text, parse_choice


@pytest.fixture
def session(controller):
    return Session(controller=controller)


def test_number_switches_screen(session):
    assert handle_command(session, "3").message is None
    assert session.screen == Screen.COMPANION
    handle_command(session, "5")
    assert session.screen == Screen.FINAL


def test_mark_interview(session):
    result = handle_command(session, "e 1")

    assert result.message == "Entrevistaste a Alicia."
    assert session.controller.is_interviewed("a")
    assert session.screen == Screen.INTERVIEWS


def test_mark_interview_twice(session):
    handle_command(session, "e 1")
    result = handle_command(session, "e 1")
    assert result.message == "Alicia ya fue entrevistado."
    assert session.controller.interview_count() == 1


def test_second_interview_announces_clue(session):
    handle_command(session, "e 1")
    result = handle_command(session, "E 3")
    assert result.message == "Entrevistaste a Carla. La pista está disponible."


@pytest.mark.parametrize("value", ["e 0", "e 4", "e", "e x", "e ²"])
def test_invalid_interview(session, value):
    assert handle_command(session, value).message == "Entrevista inválida."
    assert session.controller.interview_count() == 0


def test_decision_blocked_by_gate(session):
    result = handle_command(session, "d 1")
    assert result.message == "Faltan 2 entrevista(s) para destrabar la pista."
    assert session.controller.current_decision() is None


def test_decision_flow(session):
    handle_command(session, "e 1")
    handle_command(session, "e 2")

    assert handle_command(session, "d 3").message == "Decisión inválida."
    assert handle_command(session, "d 2").message == "Elegiste: Decir la verdad"
    assert handle_command(session, "d 1").message == "La decisión ya fue tomada."
    assert session.controller.current_decision().id == "slow"


def test_quit_and_unknown(session):
    assert handle_command(session, "q").quit
    assert handle_command(session, "6").message == "Comando desconocido."
    assert handle_command(session, "²").message == "Comando desconocido."
    assert handle_command(session, "   ").message is None


def test_menu_marks_active_screen():
    text = menu_text(Screen.CLUES)
    assert "[4) Pistas]" in text
    assert "1) Expediente" in text


def test_parse_choice():
    assert parse_choice("1", 2) == 0
    assert parse_choice("2", 2) == 1
    assert parse_choice("3", 2) is None
    assert parse_choice("-1", 2) is None
    assert parse_choice("²", 2) is None
