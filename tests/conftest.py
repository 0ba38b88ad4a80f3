from __future__ import annotations

from datetime import datetime
from functools import partial
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.samia_suite.samia_suite.container import build_container


class InMemoryStore:
    def __init__(self, items: Optional[dict[str, str]] = None):
        self.items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


# One iteration keeps seeding the directory fast.
fast_hash = partial(generate_password_hash, method="pbkdf2:sha256:1")


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def make_store():
    return InMemoryStore


@pytest.fixture
def hash_password():
    return fast_hash


@pytest.fixture
def fixed_now() -> datetime:
    # A Wednesday.
    return datetime(2025, 3, 12, 9, 30, 0)


@pytest.fixture
def container(store):
    return build_container(store=store, durable=InMemoryStore(), ephemeral=InMemoryStore(), hash_password=fast_hash)
