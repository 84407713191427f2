"""Tests for the table bootstrap command."""

from tech_news import init_db as init_db_module


def test_init_db_creates_tables(monkeypatch) -> None:
    calls: list[str] = []
    monkeypatch.setattr(init_db_module, "create_tables", lambda: calls.append("create"))
    monkeypatch.setattr(init_db_module, "drop_tables", lambda: calls.append("drop"))

    init_db_module.main([])

    assert calls == ["create"]


def test_init_db_force_drops_first(monkeypatch) -> None:
    calls: list[str] = []
    monkeypatch.setattr(init_db_module, "create_tables", lambda: calls.append("create"))
    monkeypatch.setattr(init_db_module, "drop_tables", lambda: calls.append("drop"))

    init_db_module.main(["--force"])

    assert calls == ["drop", "create"]
