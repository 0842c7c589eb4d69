"""Tests for logging configuration and the command-line entrypoint."""

from __future__ import annotations

import pytest
import structlog

from itunes_search import main as main_module
from itunes_search.config import SearchSettings
from itunes_search.domain.models import ResultType
from itunes_search.logging import configure_logging
from itunes_search.services.transport import StaticTransport


def test_configure_logging_outputs_json(capsys):
    configure_logging()
    logger = structlog.get_logger()
    logger.info("unit-test", foo="bar")
    out = capsys.readouterr().out
    assert "unit-test" in out
    assert "foo" in out


def test_configure_logging_accepts_level_names(capsys):
    configure_logging("warning")
    logger = structlog.get_logger()
    logger.info("hidden-event")
    logger.warning("shown-event")
    out = capsys.readouterr().out
    assert "hidden-event" not in out
    assert "shown-event" in out


def test_parse_args_defaults():
    args = main_module.parse_args(["daft punk"])
    assert args.term == "daft punk"
    assert args.result_type is None
    assert args.log_level is None


def test_parse_args_rejects_unknown_type():
    with pytest.raises(SystemExit):
        main_module.parse_args(["x", "--type", "vinyl"])


@pytest.mark.asyncio
async def test_run_prints_results(capsys, settings, envelope_bytes):
    code = await main_module.run(
        "daft punk",
        ResultType.MUSIC,
        settings=settings,
        transport=StaticTransport(data=envelope_bytes),
    )

    out = capsys.readouterr().out
    assert code == 0
    assert "One More Time - Daft Punk" in out
    assert out.index("One More Time") < out.index("Digital Love")


@pytest.mark.asyncio
async def test_run_reports_failure(capsys, settings):
    code = await main_module.run(
        "daft punk",
        ResultType.MUSIC,
        settings=settings,
        transport=StaticTransport(),
    )

    out = capsys.readouterr().out
    assert code == 1
    assert "invalid_state_no_error_but_no_data" in out


def test_main_wires_settings_and_arguments(monkeypatch):
    captured: dict = {}

    async def fake_run(term, result_type, *, settings, transport=None):
        captured.update(term=term, result_type=result_type, settings=settings)
        return 0

    settings = SearchSettings(default_result_type=ResultType.SOFTWARE)
    monkeypatch.setattr(main_module, "run", fake_run)
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)
    monkeypatch.setattr(main_module, "configure_logging", lambda level: captured.update(level=level))

    assert main_module.main(["xcode"]) == 0
    assert captured["term"] == "xcode"
    assert captured["result_type"] is ResultType.SOFTWARE
    assert captured["level"] == "INFO"

    assert main_module.main(["daft punk", "--type", "music", "--log-level", "DEBUG"]) == 0
    assert captured["result_type"] is ResultType.MUSIC
    assert captured["level"] == "DEBUG"
