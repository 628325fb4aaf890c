from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.helpers.traduora import FakeTraduora, make_client_factory
from traduora_sync.adapters.traduora import TraduoraClient

if TYPE_CHECKING:
    from collections.abc import Callable

    from traduora_sync.config.traduora import TraduoraConfig


@pytest.fixture
def fake_traduora() -> FakeTraduora:
    return FakeTraduora(
        terms={"t1": "greeting", "t2": "farewell", "t3": "untranslated"},
        translations={"t1": "Hello", "t2": "Goodbye", "orphan": "dropped"},
    )


@pytest.fixture
def make_traduora_client() -> Callable[[TraduoraConfig, FakeTraduora], TraduoraClient]:
    def make(config: TraduoraConfig, server: FakeTraduora) -> TraduoraClient:
        return TraduoraClient(config=config, client_factory=make_client_factory(server))

    return make


@pytest.fixture
def traduora_client(
    traduora_config: TraduoraConfig,
    fake_traduora: FakeTraduora,
    make_traduora_client: Callable[[TraduoraConfig, FakeTraduora], TraduoraClient],
) -> TraduoraClient:
    return make_traduora_client(traduora_config, fake_traduora)
