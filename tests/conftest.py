"""Shared pytest fixtures for casefile tests."""

from __future__ import annotations

import copy

import pytest

from casefile.cases.loader import load_case
from casefile.investigation.progress import ProgressController

RAW_CASE = {
    "title": "Caso de prueba",
    "victim": "Ana Gómez",
    "summary": "Un caso cerrado demasiado rápido.",
    "companion": ["Primera línea.", "Segunda línea."],
    "interviews": [
        {"id": "a", "name": "Alicia", "line": "No vi nada.", "obs": "Mira el reloj."},
        {"id": "b", "name": "Bruno", "line": "Me fui temprano.", "obs": "Su auto seguía ahí."},
        {"id": "c", "name": "Carla", "line": "Tengo una copia.", "obs": "Le tiembla la voz."},
    ],
    "clue": "La llave salió a las 21:40.",
    "final": [
        {"id": "fast", "label": "Ascender rápido"},
        {"id": "slow", "label": "Decir la verdad"},
    ],
}


@pytest.fixture
def raw_case():
    """A fresh, mutable copy of a valid case record."""
    return copy.deepcopy(RAW_CASE)


@pytest.fixture
def case(raw_case):
    return load_case(raw_case)


@pytest.fixture
def controller(case):
    return ProgressController(case)


@pytest.fixture
def ready_controller(controller):
    """Controller with the interview gate already open."""
    controller.record_interview("a")
    controller.record_interview("b")
    return controller
