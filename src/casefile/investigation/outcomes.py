"""Narrative resolution for the final decision."""

from __future__ import annotations

from casefile.domain.errors import UnknownFinalChoiceId
from casefile.domain.models import Case

FAST_CHOICE_ID = "fast"

HIDDEN_COST_OUTCOME = "Ascendés… pero dejás una sombra."
PRINCIPLED_OUTCOME = "La verdad te fortalece… y te pone en la mira."


def resolve_outcome(case: Case, choice_id: str) -> str:
    """Return the outcome text for a final choice.

    Outcome text attached to the choice in the case data wins. Without
    it, the rule is a two-way split on one identifier: ``FAST_CHOICE_ID``
    gets the hidden-cost ending and every other id the principled one.
    A third choice added without its own ``outcome`` therefore lands in
    the principled branch.
    """
    choice = case.final_choice(choice_id)
    if choice is None:
        raise UnknownFinalChoiceId(choice_id)
    if choice.outcome is not None:
        return choice.outcome
    if choice.id == FAST_CHOICE_ID:
        return HIDDEN_COST_OUTCOME
    return PRINCIPLED_OUTCOME
