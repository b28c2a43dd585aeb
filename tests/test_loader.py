"""Case construction from raw records and case files."""

from __future__ import annotations

import json

import pytest
import yaml
from pydantic import ValidationError

from casefile import config
from casefile.cases.loader import load_case, load_case_file, load_default_case, read_case_data
from casefile.domain.errors import (
    CaseDataError,
    DuplicateFinalChoiceId,
    DuplicateInterviewId,
    EmptyFinalChoiceList,
    MalformedCaseData,
)
from casefile.domain.models import Case


class TestLoadCase:
    def test_builds_case_fields(self, raw_case):
        case = load_case(raw_case)

        assert case.title == "Caso de prueba"
        assert case.victim == "Ana Gómez"
        assert case.clue == "La llave salió a las 21:40."
        assert case.interviews[1].observation == "Su auto seguía ahí."
        assert case.final_choices[0].label == "Ascender rápido"
        assert case.twist is None
        assert case.case_id == "case"

    def test_preserves_source_order(self, raw_case):
        raw_case["interviews"].reverse()
        raw_case["final"].reverse()
        raw_case["companion"].reverse()

        case = load_case(raw_case)

        assert [entry.id for entry in case.interviews] == ["c", "b", "a"]
        assert [choice.id for choice in case.final_choices] == ["slow", "fast"]
        assert case.companion_lines == ("Segunda línea.", "Primera línea.")

    def test_companion_may_be_missing_or_empty(self, raw_case):
        del raw_case["companion"]
        assert load_case(raw_case).companion_lines == ()
        raw_case["companion"] = []
        assert load_case(raw_case).companion_lines == ()

    def test_case_id_argument_used_when_record_has_none(self, raw_case):
        assert load_case(raw_case, case_id="case042").case_id == "case042"
        raw_case["case_id"] = "own"
        assert load_case(raw_case, case_id="case042").case_id == "own"

    def test_case_is_frozen(self, case):
        with pytest.raises(ValidationError):
            case.title = "Otro título"
        with pytest.raises(ValidationError):
            case.interviews[0].name = "Otra persona"

    @pytest.mark.parametrize("field", ["title", "victim", "summary", "clue"])
    def test_missing_scalar_is_malformed(self, raw_case, field):
        del raw_case[field]
        with pytest.raises(MalformedCaseData):
            load_case(raw_case)

    @pytest.mark.parametrize("value", ["", "   ", 7, None])
    def test_blank_or_non_string_title_is_malformed(self, raw_case, value):
        raw_case["title"] = value
        with pytest.raises(MalformedCaseData):
            load_case(raw_case)

    def test_non_mapping_is_malformed(self):
        with pytest.raises(MalformedCaseData):
            load_case(["not", "a", "record"])

    @pytest.mark.parametrize("field", ["id", "name", "line", "obs"])
    def test_interview_missing_field_is_malformed(self, raw_case, field):
        del raw_case["interviews"][0][field]
        with pytest.raises(MalformedCaseData) as excinfo:
            load_case(raw_case)
        assert "interviews[0]" in str(excinfo.value)

    def test_interviews_must_be_a_list(self, raw_case):
        raw_case["interviews"] = "a, b, c"
        with pytest.raises(MalformedCaseData):
            load_case(raw_case)
        del raw_case["interviews"]
        with pytest.raises(MalformedCaseData):
            load_case(raw_case)

    def test_companion_entries_must_be_strings(self, raw_case):
        raw_case["companion"] = ["ok", 3]
        with pytest.raises(MalformedCaseData):
            load_case(raw_case)

    def test_unknown_interview_field_is_malformed(self, raw_case):
        raw_case["interviews"][0]["mood"] = "nervioso"
        with pytest.raises(MalformedCaseData):
            load_case(raw_case)

    def test_duplicate_interview_id(self, raw_case):
        raw_case["interviews"][2]["id"] = "a"
        with pytest.raises(DuplicateInterviewId) as excinfo:
            load_case(raw_case)
        assert excinfo.value.interview_id == "a"

    @pytest.mark.parametrize("field", ["id", "label"])
    def test_final_choice_missing_field_is_malformed(self, raw_case, field):
        del raw_case["final"][1][field]
        with pytest.raises(MalformedCaseData):
            load_case(raw_case)

    def test_duplicate_final_choice_id(self, raw_case):
        raw_case["final"].append({"id": "fast", "label": "Otra vez rápido"})
        with pytest.raises(DuplicateFinalChoiceId) as excinfo:
            load_case(raw_case)
        assert excinfo.value.choice_id == "fast"

    def test_empty_final_choice_list(self, raw_case):
        raw_case["final"] = []
        with pytest.raises(EmptyFinalChoiceList):
            load_case(raw_case)

    def test_missing_final_is_malformed(self, raw_case):
        del raw_case["final"]
        with pytest.raises(MalformedCaseData):
            load_case(raw_case)

    def test_construction_errors_share_a_base(self, raw_case):
        raw_case["final"] = []
        with pytest.raises(CaseDataError):
            load_case(raw_case)
        with pytest.raises(ValueError):
            load_case(raw_case)


class TestCaseFiles:
    def test_json_file_uses_stem_as_case_id(self, tmp_path, raw_case):
        path = tmp_path / "case007.json"
        path.write_text(json.dumps(raw_case, ensure_ascii=False), encoding="utf-8")

        case = load_case_file(path)

        assert case.case_id == "case007"
        assert case.victim == "Ana Gómez"

    def test_yaml_file(self, tmp_path, raw_case):
        path = tmp_path / "case008.yml"
        path.write_text(yaml.safe_dump(raw_case, allow_unicode=True), encoding="utf-8")

        case = load_case_file(path)

        assert [entry.id for entry in case.interviews] == ["a", "b", "c"]

    def test_missing_file_is_malformed(self, tmp_path):
        with pytest.raises(MalformedCaseData):
            read_case_data(tmp_path / "nope.json")

    def test_invalid_json_is_malformed(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{ not json", encoding="utf-8")
        with pytest.raises(MalformedCaseData):
            read_case_data(path)

    def test_non_utf8_file_is_malformed(self, tmp_path):
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"title": "\xff\xfe"}')
        with pytest.raises(MalformedCaseData):
            read_case_data(path)

    def test_top_level_list_is_malformed(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(MalformedCaseData):
            read_case_data(path)

    def test_bundled_case_ships_inside_the_package(self):
        assert config.DEFAULT_CASE_PATH.is_file()
        assert config.DEFAULT_CASE_PATH.is_relative_to(config.PACKAGE_DIR)

    def test_bundled_case(self):
        case = load_default_case()

        assert case.case_id == "case001"
        assert [choice.id for choice in case.final_choices] == ["fast", "slow"]
        assert len(case.interviews) >= 2
        assert case.twist


class TestDirectConstruction:
    def test_duplicate_ids_rejected_without_loader(self, case):
        data = case.model_dump()
        data["interviews"].append(data["interviews"][0])
        with pytest.raises(ValidationError):
            Case.model_validate(data)

    def test_empty_final_rejected_without_loader(self, case):
        data = case.model_dump()
        data["final_choices"] = []
        with pytest.raises(ValidationError):
            Case.model_validate(data)
