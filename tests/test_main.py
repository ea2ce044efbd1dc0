from __future__ import annotations
import sys
import pytest
import main


def test_launcher_runs_api_app(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kw: calls.append((app, kw)))
    monkeypatch.setattr(sys, "argv", ["main.py", "--port", "8080", "--log-level", "debug"])
    main.main()
    app, kwargs = calls[0]
    assert app == "api.main:app"
    assert kwargs["port"] == 8080
    assert kwargs["log_level"] == "debug"
    assert kwargs["workers"] == 1


def test_usage_does_not_assume_uv() -> None:
    assert "uv run" not in main.__doc__
    assert "python main.py" in main.__doc__
