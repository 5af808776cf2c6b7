from unittest.mock import patch

import pytest

import run


def test_missing_api_key_exits(monkeypatch):
    monkeypatch.delenv("PERPLEXITY_API_KEY", raising=False)

    with patch("run.uvicorn.run") as uvicorn_run:
        with pytest.raises(SystemExit) as exc_info:
            run.main()

    assert exc_info.value.code == 1
    uvicorn_run.assert_not_called()


@pytest.mark.parametrize("port", ["abc", "70000"])
def test_invalid_port_exits(monkeypatch, port):
    monkeypatch.setenv("PORT", port)

    with patch("run.uvicorn.run") as uvicorn_run:
        with pytest.raises(SystemExit) as exc_info:
            run.main()

    assert exc_info.value.code == 1
    uvicorn_run.assert_not_called()


def test_starts_uvicorn_with_configured_port(monkeypatch):
    monkeypatch.setenv("PORT", "8123")

    with patch("run.uvicorn.run") as uvicorn_run:
        run.main()

    uvicorn_run.assert_called_once()
    assert uvicorn_run.call_args.args == ("app.main:app",)
    assert uvicorn_run.call_args.kwargs["port"] == 8123
    assert uvicorn_run.call_args.kwargs["host"] == "0.0.0.0"
