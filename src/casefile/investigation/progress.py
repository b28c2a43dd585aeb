"""Per-playthrough progress and the rules that gate it."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging

from casefile.domain.enums import ProgressStage
from casefile.domain.errors import (
    DecisionAlreadyMade,
    FinalDecisionNotAllowed,
    UnknownFinalChoiceId,
    UnknownInterviewId,
)
from casefile.domain.models import Case, FinalChoice
from casefile.investigation.outcomes import resolve_outcome
from casefile.investigation.thresholds import (
    CLUE_UNLOCK_INTERVIEWS,
    GateAssessment,
    evaluate_gate,
)

logger = logging.getLogger(__name__)


@dataclass
class Progress:
    interviewed_ids: set[str] = field(default_factory=set)
    decision_id: str | None = None


class ProgressController:
    """Owns the Progress of one playthrough over a read-only Case.

    Interviews only accumulate and the decision is write-once. The
    READY stage is derived from the interview count and never stored.
    """

    def __init__(self, case: Case) -> None:
        self.case = case
        self._progress = Progress()

    def record_interview(self, interview_id: str) -> None:
        if not self.case.has_interview(interview_id):
            logger.warning("Rejected unknown interview id %r", interview_id)
            raise UnknownInterviewId(interview_id)
        if interview_id in self._progress.interviewed_ids:
            return
        was_open = self.is_clue_unlocked()
        self._progress.interviewed_ids.add(interview_id)
        logger.info(
            "Interview recorded: %s (%d/%d)",
            interview_id,
            self.interview_count(),
            len(self.case.interviews),
        )
        if not was_open and self.is_clue_unlocked():
            logger.info("Clue unlocked after %d interviews.", self.interview_count())

    def interview_count(self) -> int:
        return len(self._progress.interviewed_ids)

    def is_interviewed(self, interview_id: str) -> bool:
        return interview_id in self._progress.interviewed_ids

    def gate(self) -> GateAssessment:
        return evaluate_gate(self.interview_count(), CLUE_UNLOCK_INTERVIEWS)

    def is_clue_unlocked(self) -> bool:
        return self.gate().is_open

    def is_final_decision_allowed(self) -> bool:
        return self.gate().is_open

    def interviews_remaining(self) -> int:
        return self.gate().remaining

    def record_decision(self, choice_id: str) -> None:
        if not self.is_final_decision_allowed():
            logger.warning("Decision %r requested before the gate opened.", choice_id)
            raise FinalDecisionNotAllowed(self.interview_count(), CLUE_UNLOCK_INTERVIEWS)
        if not self.case.has_final_choice(choice_id):
            logger.warning("Rejected unknown final choice id %r", choice_id)
            raise UnknownFinalChoiceId(choice_id)
        current = self._progress.decision_id
        if current is not None:
            if current == choice_id:
                return
            logger.warning("Decision %r rejected; %r already chosen.", choice_id, current)
            raise DecisionAlreadyMade(current, choice_id)
        self._progress.decision_id = choice_id
        logger.info("Final decision recorded: %s", choice_id)

    def current_decision(self) -> FinalChoice | None:
        if self._progress.decision_id is None:
            return None
        return self.case.final_choice(self._progress.decision_id)

    def resolution_text(self, choice_id: str) -> str:
        return resolve_outcome(self.case, choice_id)

    def stage(self) -> ProgressStage:
        if self._progress.decision_id is not None:
            return ProgressStage.DECIDED
        if self.is_final_decision_allowed():
            return ProgressStage.READY
        return ProgressStage.NOT_READY

    def interviewed_ids(self) -> frozenset[str]:
        return frozenset(self._progress.interviewed_ids)
