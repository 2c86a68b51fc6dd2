import logging

from fastapi.testclient import TestClient

from vibeset.api.fastapi_app import app
from vibeset.core import log_error, log_info, log_step, log_success, log_warning
from vibeset.core.logging_utils import LOGGER_NAME, marked


def test_marked_prefixes() -> None:
    assert marked("info", "plain") == "plain"
    assert marked("step", "Exchanging code") == "→ Exchanging code"
    assert marked("success", "done") == "✅ done"
    assert marked("warning", "careful") == "⚠️ careful"
    assert marked("error", "broken") == "❌ broken"


def test_helpers_log_on_project_logger(caplog) -> None:
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        log_info("a")
        log_step("b")
        log_success("c")
        log_warning("d")
        log_error("e")

    records = [r for r in caplog.records if r.name == LOGGER_NAME]
    assert [(r.levelno, r.getMessage()) for r in records] == [
        (logging.INFO, "a"),
        (logging.INFO, "→ b"),
        (logging.INFO, "✅ c"),
        (logging.WARNING, "⚠️ d"),
        (logging.ERROR, "❌ e"),
    ]


def test_helpers_respect_logger_level(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
        log_step("hidden")
        log_warning("shown")

    messages = [r.getMessage() for r in caplog.records if r.name == LOGGER_NAME]
    assert messages == ["⚠️ shown"]


def test_rejected_callback_is_logged_as_warning(caplog) -> None:
    client = TestClient(app)

    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        response = client.get(
            "/api/spotify/callback",
            params={"code": "c", "state": "forged"},
            follow_redirects=False,
        )

    assert response.headers["location"] == "/?error=invalid_state"
    [record] = [
        r for r in caplog.records if r.name == LOGGER_NAME and r.levelno == logging.WARNING
    ]
    assert "invalid_state" in record.getMessage()
