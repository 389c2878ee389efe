"""Tests for environment-driven runtime settings."""

from pathlib import Path

from spellmail.settings import Settings


def test_defaults(monkeypatch):
    for name in ("SPELLMAIL_CONFIG", "SPELLMAIL_ASPELL", "SPELLMAIL_SENDMAIL",
                 "SPELLMAIL_OUTBOX", "SPELLMAIL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    s = Settings()
    assert s.config_path == Path("spellmail.toml")
    assert s.aspell_command == "aspell"
    assert s.sendmail_command == "/usr/sbin/sendmail"
    assert s.outbox_dir == Path(".")
    assert s.log_level == "WARNING"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SPELLMAIL_CONFIG", str(tmp_path / "custom.toml"))
    monkeypatch.setenv("SPELLMAIL_ASPELL", "/opt/aspell/bin/aspell --dict-dir=/opt/dicts")
    monkeypatch.setenv("SPELLMAIL_OUTBOX", str(tmp_path))

    s = Settings()
    assert s.config_path == tmp_path / "custom.toml"
    assert s.aspell_command.startswith("/opt/aspell/bin/aspell")
    assert s.outbox_dir == tmp_path
