from __future__ import annotations

import runpy


def test_main_module_invokes_server(monkeypatch):
    executed = {}

    def fake_main() -> None:
        executed["called"] = True

    monkeypatch.setattr("src.main.server.main", fake_main)

    runpy.run_module("src.main.__main__", run_name="__main__")

    assert executed["called"] is True


def test_server_main_runs_uvicorn_with_settings(monkeypatch):
    captured = {}

    def fake_run(app_path, **kwargs):
        captured["app"] = app_path
        captured.update(kwargs)

    monkeypatch.setenv("PORT", "4000")
    monkeypatch.setattr("src.main.server.uvicorn.run", fake_run)

    from src.main.server import main

    main()

    assert captured["app"] == "src.main.app:app"
    assert captured["port"] == 4000
    assert captured["reload"] is False
