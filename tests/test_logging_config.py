from __future__ import annotations

import json

import structlog

from millionaire.core.logging import configure_logging


def test_configure_logging_renders_json_events() -> None:
    configure_logging("debug")

    processors = structlog.get_config()["processors"]
    renderer = processors[-1]

    assert isinstance(renderer, structlog.processors.JSONRenderer)
    rendered = renderer(None, "info", {"event": "game_session_created", "user_id": 1})
    assert json.loads(rendered) == {"event": "game_session_created", "user_id": 1}
