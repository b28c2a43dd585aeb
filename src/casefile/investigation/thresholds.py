"""Interview gate shared by the clue and the final decision."""

from __future__ import annotations

from dataclasses import dataclass

CLUE_UNLOCK_INTERVIEWS = 2


@dataclass(frozen=True)
class GateAssessment:
    is_open: bool
    remaining: int
    explanation: list[str]


def evaluate_gate(
    interview_count: int, min_interviews: int = CLUE_UNLOCK_INTERVIEWS
) -> GateAssessment:
    remaining = max(0, min_interviews - interview_count)
    is_open = remaining == 0
    if is_open:
        explanation = ["Suficientes entrevistas para avanzar."]
    else:
        explanation = [f"Faltan {remaining} entrevista(s) para destrabar la pista."]
    return GateAssessment(is_open=is_open, remaining=remaining, explanation=explanation)
