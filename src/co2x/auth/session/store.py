from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any, Protocol, runtime_checkable

from pydantic import ValidationError

from co2x.auth.providers.line import LineUserProfile

logger = logging.getLogger(__name__)


@runtime_checkable
class StorageProtocol(Protocol):
    """String key-value storage with the shape of a browser ``Storage``."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class MappingStorage:
    """Adapts a mutable mapping, such as Starlette's ``request.session``."""

    def __init__(self, mapping: MutableMapping[str, Any]) -> None:
        self.mapping = mapping

    def get_item(self, key: str) -> str | None:
        value = self.mapping.get(key)
        return None if value is None else str(value)

    def set_item(self, key: str, value: str) -> None:
        self.mapping[key] = value

    def remove_item(self, key: str) -> None:
        self.mapping.pop(key, None)


class SessionStore:
    """Cached LINE profile plus the temporary keys of an in-flight login."""

    USER_KEY = "line_user_data"
    STATE_KEY = "line_state"
    NONCE_KEY = "line_nonce"
    ACCESS_TOKEN_KEY = "line_access_token"  # noqa: S105
    ID_TOKEN_KEY = "line_id_token"  # noqa: S105

    TEMPORARY_KEYS = (STATE_KEY, NONCE_KEY, ACCESS_TOKEN_KEY, ID_TOKEN_KEY)

    def __init__(self, storage: StorageProtocol | None = None) -> None:
        self.storage = storage if storage is not None else MemoryStorage()

    def get_user(self) -> LineUserProfile | None:
        if not (data := self.storage.get_item(self.USER_KEY)):
            return None
        try:
            return LineUserProfile.model_validate_json(data)
        except ValidationError:
            logger.exception("Failed to parse stored user data")
            return None

    def set_user(self, user: LineUserProfile) -> None:
        self.storage.set_item(self.USER_KEY, user.model_dump_json(by_alias=True, exclude_none=True))

    def save_state(self, state: str) -> None:
        self.storage.set_item(self.STATE_KEY, state)

    def pop_state(self) -> str | None:
        state = self.storage.get_item(self.STATE_KEY)
        self.storage.remove_item(self.STATE_KEY)
        self.storage.remove_item(self.NONCE_KEY)
        return state

    def clear_temporary(self) -> None:
        for key in self.TEMPORARY_KEYS:
            self.storage.remove_item(key)

    def clear(self) -> None:
        self.storage.remove_item(self.USER_KEY)
        self.clear_temporary()
