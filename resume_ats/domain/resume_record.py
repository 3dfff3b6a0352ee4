"""Structured resume input consumed by the ATS scoring engine.

Every field is optional. Missing and ``None`` values collapse to the empty
value of their type at this boundary, so scoring rules only ever see
empty strings, empty lists, and empty mappings.

Both the camelCase keys produced by the browser form state
(``personalInfo``, ``graduationDate``) and snake_case keys are accepted.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class _RecordModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        coerce_numbers_to_str=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name is not None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


def _clean_strings(value: Any) -> Any:
    if not isinstance(value, (list, tuple, set, frozenset)):
        return value
    cleaned: List[str] = []
    for item in value:
        if item is None:
            continue
        text = str(item)
        if text.strip():
            cleaned.append(text)
    return cleaned


class PersonalInfo(_RecordModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    portfolio: str = ""
    summary: str = ""
    photo_url: str = ""


class ExperienceEntry(_RecordModel):
    title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""


class EducationEntry(_RecordModel):
    degree: str = ""
    school: str = ""
    location: str = ""
    graduation_date: str = ""
    gpa: Optional[str] = None


class Skills(_RecordModel):
    technical: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)

    @field_validator("technical", "languages", "certifications", mode="before")
    @classmethod
    def _drop_blank_skills(cls, value: Any) -> Any:
        return _clean_strings(value)


class ResumeRecord(_RecordModel):
    """A full resume as filled in by the editor, possibly sparse."""

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: Skills = Field(default_factory=Skills)
    coding_profiles: Dict[str, str] = Field(default_factory=dict)
    hobbies: List[str] = Field(default_factory=list)

    @field_validator("experience", "education", mode="before")
    @classmethod
    def _drop_null_entries(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [entry for entry in value if entry is not None]
        return value

    @field_validator("coding_profiles", mode="before")
    @classmethod
    def _drop_null_profiles(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {str(k): str(v) for k, v in value.items() if v is not None}
        return value

    @field_validator("hobbies", mode="before")
    @classmethod
    def _drop_blank_hobbies(cls, value: Any) -> Any:
        return _clean_strings(value)

    @property
    def summary(self) -> str:
        return self.personal_info.summary

    def profile_link(self, platform: str) -> str:
        """Return the profile URL for *platform* (case-insensitive), or ``""``."""
        wanted = platform.lower()
        for name, url in self.coding_profiles.items():
            if name.lower() == wanted:
                return url
        return ""
