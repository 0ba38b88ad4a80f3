from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """String-keyed store, same surface as browser Web Storage.

    Note (DIP): repositories depend on this interface, never on MySQL or Flask directly.
    """

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError
