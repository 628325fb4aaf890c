from __future__ import annotations

from pathlib import Path

import pytest

from traduora_sync.config.traduora import FIELDS, PasswordLogin, TraduoraConfig, env_var_name

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def _clear_traduora_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in FIELDS:
        monkeypatch.delenv(env_var_name(name), raising=False)


@pytest.fixture
def translation_file() -> Path:
    return DATA_DIR / "en.json"


@pytest.fixture
def traduora_config(translation_file: Path) -> TraduoraConfig:
    return TraduoraConfig(
        host="localhost:8080",
        credentials=PasswordLogin(username="test@test.test", password="12345678"),  # noqa: S106
        project_id="92047938-c050-4d9c-83f8-6b1d7fae6b01",
        locale="en",
        translation_file=translation_file,
        insecure=True,
    )
