"""Error taxonomy for case loading and session progress."""

from __future__ import annotations


class CaseError(Exception):
    """Base class for every error raised by casefile."""


class CaseDataError(CaseError, ValueError):
    """Raised while building a Case; fatal to startup."""


class MalformedCaseData(CaseDataError):
    pass


class DuplicateInterviewId(CaseDataError):
    def __init__(self, interview_id: str) -> None:
        super().__init__(f"Duplicate interview id: {interview_id}")
        self.interview_id = interview_id


class DuplicateFinalChoiceId(CaseDataError):
    def __init__(self, choice_id: str) -> None:
        super().__init__(f"Duplicate final choice id: {choice_id}")
        self.choice_id = choice_id


class EmptyFinalChoiceList(CaseDataError):
    def __init__(self) -> None:
        super().__init__("Case must define at least one final choice.")


class ProgressError(CaseError):
    """Raised when a caller drives the progress controller incorrectly."""


class UnknownInterviewId(ProgressError, LookupError):
    def __init__(self, interview_id: str) -> None:
        super().__init__(f"Unknown interview id: {interview_id}")
        self.interview_id = interview_id


class UnknownFinalChoiceId(ProgressError, LookupError):
    def __init__(self, choice_id: str) -> None:
        super().__init__(f"Unknown final choice id: {choice_id}")
        self.choice_id = choice_id


class FinalDecisionNotAllowed(ProgressError):
    def __init__(self, interview_count: int, required: int) -> None:
        super().__init__(
            f"Final decision needs {required} interviews, only {interview_count} recorded."
        )
        self.interview_count = interview_count
        self.required = required


class DecisionAlreadyMade(ProgressError):
    def __init__(self, current_id: str, requested_id: str) -> None:
        super().__init__(
            f"Decision already made ({current_id}); cannot change to {requested_id}."
        )
        self.current_id = current_id
        self.requested_id = requested_id
