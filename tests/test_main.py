import json
import logging

import pytest
import structlog

import main


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.asyncio
async def test_main_without_urls_uses_mock_interface(capsys) -> None:
    assert await main.main([]) == 0

    records = json.loads(capsys.readouterr().out)
    assert records[0] == {"Arnie Quote": "Get to the chopper"}
    assert records[-1] == {"FAILURE": "Your request has been terminated"}


@pytest.mark.asyncio
async def test_main_reports_failure(monkeypatch, capsys) -> None:
    async def _boom(urls, config):
        raise RuntimeError("network down")

    monkeypatch.setattr(main, "run", _boom)

    assert await main.main(["http://quotes.test/a"]) == 1
    assert capsys.readouterr().out == ""


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [FileNotFoundError("config.yaml"), ValueError("Invalid YAML")])
async def test_main_reports_config_errors(monkeypatch, capsys, error) -> None:
    def _broken_config():
        raise error

    monkeypatch.setattr(main, "Config", _broken_config)

    assert await main.main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "quotes_run_failed" in captured.err
