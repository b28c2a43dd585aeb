"""Domain models for the immutable case file."""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

from casefile.domain.rules import first_duplicate, require_text

Text = Annotated[str, AfterValidator(require_text)]


class CaseEntity(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    id: Text


class InterviewEntry(CaseEntity):
    name: Text
    line: Text
    observation: Text = Field(alias="obs")


class FinalChoice(CaseEntity):
    label: Text
    outcome: Text | None = None


class Case(BaseModel):
    """One validated case file.

    Build it through ``casefile.cases.loader.load_case``, which reports
    duplicate ids and an empty final list as their own CaseDataError
    types. Direct construction only gets the generic pydantic
    ValidationError from the id checks below.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    case_id: Text = "case"
    title: Text
    victim: Text
    summary: Text
    companion_lines: tuple[str, ...] = Field(default=(), alias="companion")
    interviews: tuple[InterviewEntry, ...] = ()
    clue: Text
    final_choices: tuple[FinalChoice, ...] = Field(alias="final")
    twist: Text | None = None
    objective: Text | None = None

    @model_validator(mode="after")
    def _check_ids(self) -> "Case":
        if not self.final_choices:
            raise ValueError("final choices must not be empty")
        duplicate = first_duplicate(entry.id for entry in self.interviews)
        if duplicate is not None:
            raise ValueError(f"duplicate interview id: {duplicate}")
        duplicate = first_duplicate(choice.id for choice in self.final_choices)
        if duplicate is not None:
            raise ValueError(f"duplicate final choice id: {duplicate}")
        return self

    def interview(self, interview_id: str) -> InterviewEntry | None:
        for entry in self.interviews:
            if entry.id == interview_id:
                return entry
        return None

    def final_choice(self, choice_id: str) -> FinalChoice | None:
        for choice in self.final_choices:
            if choice.id == choice_id:
                return choice
        return None

    def has_interview(self, interview_id: str) -> bool:
        return self.interview(interview_id) is not None

    def has_final_choice(self, choice_id: str) -> bool:
        return self.final_choice(choice_id) is not None
