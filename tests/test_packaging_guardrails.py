"""Guardrails for packaging configuration."""

from __future__ import annotations

from pathlib import Path

import tomllib

REPO_ROOT = Path(__file__).resolve().parents[1]
PYPROJECT_PATH = REPO_ROOT / "pyproject.toml"


def _load_pyproject() -> dict:
    return tomllib.loads(PYPROJECT_PATH.read_text(encoding="utf-8"))


def test_wheel_includes_package() -> None:
    pyproject = _load_pyproject()
    wheel_cfg = pyproject.get("tool", {}).get("hatch", {}).get("build", {}).get("targets", {}).get("wheel", {})
    assert wheel_cfg.get("packages") == ["resume_ats"]


def test_entrypoints_remain_stable() -> None:
    pyproject = _load_pyproject()
    scripts = pyproject.get("project", {}).get("scripts", {})
    assert scripts.get("resume-ats") == "resume_ats.cli:main"
    assert scripts.get("resume-ats-api") == "resume_ats.web.app:main"


def test_default_config_ships_with_repo() -> None:
    assert (REPO_ROOT / "config" / "scoring.yaml").is_file()
