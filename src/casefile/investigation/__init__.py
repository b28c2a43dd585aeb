"""Session progress, gating and final-decision resolution."""

from .outcomes import FAST_CHOICE_ID, HIDDEN_COST_OUTCOME, PRINCIPLED_OUTCOME, resolve_outcome
from .progress import Progress, ProgressController
from .thresholds import CLUE_UNLOCK_INTERVIEWS, GateAssessment, evaluate_gate

__all__ = [
    "CLUE_UNLOCK_INTERVIEWS",
    "FAST_CHOICE_ID",
    "GateAssessment",
    "HIDDEN_COST_OUTCOME",
    "PRINCIPLED_OUTCOME",
    "Progress",
    "ProgressController",
    "evaluate_gate",
    "resolve_outcome",
]
