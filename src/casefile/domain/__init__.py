"""Case content models, enums and errors."""

from .enums import SCREEN_LABELS, ProgressStage, Screen
from .errors import (
    CaseDataError,
    CaseError,
    DecisionAlreadyMade,
    DuplicateFinalChoiceId,
    DuplicateInterviewId,
    EmptyFinalChoiceList,
    FinalDecisionNotAllowed,
    MalformedCaseData,
    ProgressError,
    UnknownFinalChoiceId,
    UnknownInterviewId,
)
from .models import Case, FinalChoice, InterviewEntry

__all__ = [
    "Case",
    "CaseDataError",
    "CaseError",
    "DecisionAlreadyMade",
    "DuplicateFinalChoiceId",
    "DuplicateInterviewId",
    "EmptyFinalChoiceList",
    "FinalChoice",
    "FinalDecisionNotAllowed",
    "InterviewEntry",
    "MalformedCaseData",
    "ProgressError",
    "ProgressStage",
    "SCREEN_LABELS",
    "Screen",
    "UnknownFinalChoiceId",
    "UnknownInterviewId",
]
