"""Tests for the resume input model boundary."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from resume_ats.domain import ResumeRecord


def test_empty_record_defaults():
    record = ResumeRecord()
    assert record.personal_info.summary == ""
    assert record.experience == []
    assert record.education == []
    assert record.skills.technical == []
    assert record.coding_profiles == {}


def test_nulls_collapse_to_empty_values():
    record = ResumeRecord.model_validate(
        {
            "personalInfo": {"fullName": None, "summary": None},
            "experience": [None, {"title": None, "current": None}],
            "education": None,
            "skills": {"technical": None, "languages": ["", None, "German"]},
            "codingProfiles": {"github": None, "kaggle": "kaggle.com/x"},
        }
    )
    assert record.personal_info.full_name == ""
    assert record.summary == ""
    assert len(record.experience) == 1
    assert record.experience[0].title == ""
    assert record.experience[0].current is False
    assert record.education == []
    assert record.skills.technical == []
    assert record.skills.languages == ["German"]
    assert record.coding_profiles == {"kaggle": "kaggle.com/x"}


def test_camel_and_snake_case_keys():
    camel = ResumeRecord.model_validate({"education": [{"graduationDate": "2019"}]})
    snake = ResumeRecord.model_validate({"education": [{"graduation_date": "2019"}]})
    assert camel.education[0].graduation_date == "2019"
    assert snake == camel


def test_form_only_fields_are_ignored():
    record = ResumeRecord.model_validate(
        {"experience": [{"id": "abc", "title": "Engineer"}], "education": [{"id": "def", "degree": "BS"}]}
    )
    assert record.experience[0].title == "Engineer"
    assert not hasattr(record.experience[0], "id")


def test_numeric_values_become_strings():
    record = ResumeRecord.model_validate({"education": [{"graduationDate": 2019, "gpa": 3.8}]})
    assert record.education[0].graduation_date == "2019"
    assert record.education[0].gpa == "3.8"


def test_record_is_frozen():
    record = ResumeRecord()
    with pytest.raises(ValidationError):
        record.hobbies = ["chess"]


def test_profile_link_lookup_is_case_insensitive():
    record = ResumeRecord.model_validate({"codingProfiles": {"GitHub": "github.com/x"}})
    assert record.profile_link("github") == "github.com/x"
    assert record.profile_link("leetcode") == ""


def test_wrong_section_shape_raises():
    with pytest.raises(ValidationError):
        ResumeRecord.model_validate({"skills": "python, go"})
