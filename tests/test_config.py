import pytest
from pydantic import ValidationError

from rlabs.config import Settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    for name in ("COPIED_FEEDBACK_MS", "FEEDBACK_MODE", "CLIPBOARD_MECHANISM",
                 "CATALOG_PATH", "WINDOW_COLUMNS", "LOG_LEVEL"):
        monkeypatch.delenv(f"RLABS_{name}", raising=False)


def test_defaults():
    settings = Settings()

    assert settings.copied_feedback_ms == 2000
    assert settings.copied_feedback_seconds == 2.0
    assert settings.feedback_mode == "per_item"
    assert settings.clipboard_mechanism == "auto"
    assert settings.catalog_path is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("RLABS_COPIED_FEEDBACK_MS", "1500")
    monkeypatch.setenv("RLABS_FEEDBACK_MODE", "single")
    monkeypatch.setenv("rlabs_clipboard_mechanism", "legacy")

    settings = Settings()

    assert settings.copied_feedback_seconds == 1.5
    assert settings.feedback_mode == "single"
    assert settings.clipboard_mechanism == "legacy"


def test_env_file(tmp_path):
    (tmp_path / ".env").write_text("RLABS_WINDOW_COLUMNS=2\n", encoding="utf-8")
    assert Settings().window_columns == 2


@pytest.mark.parametrize("name, value", [
    ("RLABS_FEEDBACK_MODE", "forever"),
    ("RLABS_CLIPBOARD_MECHANISM", "osc52"),
    ("RLABS_COPIED_FEEDBACK_MS", "10"),
    ("RLABS_CATALOG_PATH", "/does/not/exist.json"),
])
def test_invalid_values_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings()
