"""Dependency providers for v1 API."""

from __future__ import annotations

from fastapi import Request

from ....config import ConfigurationError, load_scoring_config
from ....domain.scoring_config import ScoringConfig
from ....observability import ScoringObserver
from ...errors import APIError


def get_scoring_config(request: Request) -> ScoringConfig:
    """Return scoring configuration, loading it on first use."""
    config = getattr(request.app.state, "scoring_config", None)
    if config is not None:
        return config

    try:
        config = load_scoring_config()
    except ConfigurationError as e:
        raise APIError(
            status_code=500,
            code="CONFIG_ERROR",
            message="Scoring configuration is invalid",
            details={"issues": [{"field": i.field, "message": i.message} for i in e.issues]},
        ) from e
    except FileNotFoundError as e:
        raise APIError(status_code=500, code="CONFIG_ERROR", message=str(e)) from e

    request.app.state.scoring_config = config
    return config


def get_observer(request: Request) -> ScoringObserver:
    """Access shared scoring observer from app state."""
    return request.app.state.observer
