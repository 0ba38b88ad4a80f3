from __future__ import annotations

from typing import Protocol, Sequence

from ..core.constants import MESSAGES_KEY
from ..storage.base import KeyValueStore
from ..storage.records import load_records, save_records
from .model import InternalMessage


class MessageRepository(Protocol):
    def list_all(self) -> list[InternalMessage]:
        raise NotImplementedError

    def save_all(self, messages: Sequence[InternalMessage]) -> None:
        raise NotImplementedError


class StoreMessageRepository(MessageRepository):
    """All sites share one mailbox key."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def list_all(self) -> list[InternalMessage]:
        return load_records(self._store, MESSAGES_KEY, InternalMessage.from_dict)

    def save_all(self, messages: Sequence[InternalMessage]) -> None:
        save_records(self._store, MESSAGES_KEY, messages)
