"""Pytest fixtures for domain package tests."""

from __future__ import annotations

import copy

import pytest

FULL_RESUME = {
    "personalInfo": {
        "fullName": "Jane Smith",
        "email": "jane.smith@example.com",
        "phone": "(555) 123-4567",
        "location": "Austin, TX",
        "linkedin": "linkedin.com/in/janesmith",
        "portfolio": "",
        "summary": (
            "Senior software engineer with eight years of experience building scalable web platforms, "
            "leading small delivery teams, and shipping reliable cloud services used by millions of customers."
        ),
        "photoUrl": "",
    },
    "experience": [
        {
            "id": "exp-1",
            "title": "Senior Software Engineer",
            "company": "Acme Corp",
            "location": "Austin, TX",
            "startDate": "2020-01",
            "endDate": "Present",
            "current": True,
            "description": (
                "Led migration of the billing service to Kubernetes, cutting deploy time by 40%\n"
                "Built a real-time analytics pipeline processing 2 million events per day\n"
                "Mentored four junior engineers through their first production launches"
            ),
        }
    ],
    "education": [
        {
            "id": "edu-1",
            "degree": "B.S. Computer Science",
            "school": "State University",
            "location": "Austin, TX",
            "graduationDate": "2016",
        }
    ],
    "skills": {
        "technical": ["Python", "Kubernetes", "PostgreSQL", "React"],
        "languages": ["English"],
        "certifications": ["AWS Certified Developer"],
    },
    "codingProfiles": {"github": "github.com/janesmith"},
}


@pytest.fixture
def full_resume() -> dict:
    """A complete, well-formed resume in the editor's camelCase shape."""
    return copy.deepcopy(FULL_RESUME)
