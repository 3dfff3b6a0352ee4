"""Tests for the resume-ats command line interface."""

from __future__ import annotations

import json

import pytest

from resume_ats.cli import main

RESUME = {
    "personalInfo": {
        "email": "sam@example.com",
        "phone": "555-0100",
        "location": "Remote",
        "summary": "Data engineer who builds dependable batch and streaming pipelines for analytics teams.",
    },
    "experience": [
        {
            "startDate": "2021-05",
            "current": True,
            "description": "Built ingestion for 40 sources\nOptimized nightly jobs, saving $12k a year",
        }
    ],
    "education": [{"degree": "BSc", "school": "Tech U", "graduationDate": "2020"}],
    "skills": {"technical": ["Python", "Spark", "Airflow", "dbt", "SQL", "AWS", "Terraform", "Docker"]},
}


@pytest.fixture
def resume_file(tmp_path):
    path = tmp_path / "resume.json"
    path.write_text(json.dumps(RESUME), encoding="utf-8")
    return path


def _run(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


def test_score_prints_report(resume_file, capsys):
    assert _run(["score", str(resume_file)]) == 0
    out = capsys.readouterr().out
    assert "ATS Score:" in out
    assert "Keywords & Skills" in out


def test_score_json_output(resume_file, capsys):
    assert _run(["score", str(resume_file), "--json"]) == 0
    out = capsys.readouterr().out
    assert '"totalScore"' in out
    assert '"bestPractices"' in out


def test_score_missing_file_exits_nonzero(tmp_path, capsys):
    assert _run(["score", str(tmp_path / "missing.json")]) == 1
    assert "not found" in capsys.readouterr().out.lower()


def test_workspace_resolves_relative_path(resume_file):
    assert _run(["score", resume_file.name, "--workspace", str(resume_file.parent)]) == 0


def test_weights_table(capsys):
    assert _run(["weights"]) == 0
    out = capsys.readouterr().out
    assert "Best Practices" in out
    assert "100" in out


def test_custom_config_weights(tmp_path, capsys):
    config = tmp_path / "scoring.yaml"
    config.write_text(
        "weights:\n  keywords: 40\n  experience: 20\n  education: 10\n  formatting: 15\n  best_practices: 15\n",
        encoding="utf-8",
    )
    assert _run(["--config", str(config), "weights"]) == 0
    assert "40" in capsys.readouterr().out


def test_invalid_config_exits_nonzero(tmp_path, resume_file, capsys):
    config = tmp_path / "scoring.yaml"
    config.write_text("min_summary_length: -1\n", encoding="utf-8")
    assert _run(["--config", str(config), "score", str(resume_file)]) == 1
    assert "min_summary_length" in capsys.readouterr().out


def test_missing_config_falls_back_to_defaults(tmp_path, resume_file, capsys):
    assert _run(["--config", str(tmp_path / "absent.yaml"), "score", str(resume_file)]) == 0
    assert "Config file not found" in capsys.readouterr().out


def test_subcommand_is_required():
    assert _run([]) == 2
