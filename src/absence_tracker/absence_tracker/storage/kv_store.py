from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Key-value storage interface (the localStorage counterpart).

    Values are opaque strings; callers own serialization.
    """

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError
