"""Settings loading and the genre file reader."""

import pytest

from config import Settings
from services.genres import read_genres


def test_settings_defaults(monkeypatch):
    for var in ("DATABASE_URL", "GENRES_FILE", "DEFAULT_IMAGE", "PORT", "DEBUG"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite+aiosqlite:///./store.db"
    assert settings.genres_file == "genres.txt"
    assert settings.default_image == "/static/imgs/default.svg"
    assert settings.port == 8000
    assert settings.debug is True


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.setenv("GENRES_FILE", "")  # empty values fall back to the default

    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite+aiosqlite:///:memory:"
    assert settings.port == 9000
    assert settings.debug is False
    assert settings.genres_file == "genres.txt"


async def test_read_genres_splits_on_newlines(tmp_path):
    path = tmp_path / "genres.txt"
    path.write_text("Fiction\nSciFi", encoding="utf-8")

    assert await read_genres(path) == ["Fiction", "SciFi"]
    assert await read_genres(str(path)) == ["Fiction", "SciFi"]


async def test_read_genres_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        await read_genres(tmp_path / "nope.txt")
