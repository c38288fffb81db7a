from __future__ import annotations

from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from co2x.auth.providers.line import LineUserProfile
    from co2x.auth.session.client import LineLoginClient


class AuthSession:
    """Login state shared with everything that renders for one user.

    Opening the session loads the cached profile from storage. After that the
    profile only changes through ``complete_login`` and ``logout``. Closing it
    drops the in-memory state and leaves storage untouched.
    """

    def __init__(self, client: LineLoginClient) -> None:
        self.client = client
        self._user: LineUserProfile | None = None
        self._loading = True
        self._opened = False

    @property
    def user(self) -> LineUserProfile | None:
        return self._user

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def is_logged_in(self) -> bool:
        return self._user is not None

    def open(self) -> Self:
        self._user = self.client.store.get_user()
        self._loading = False
        self._opened = True
        return self

    def close(self) -> None:
        self._user = None
        self._loading = True
        self._opened = False

    def _ensure_open(self) -> None:
        if not self._opened:
            msg = "auth session is not open"
            raise RuntimeError(msg)

    def login(self) -> str:
        self._ensure_open()
        return self.client.login()

    async def complete_login(self, query: Mapping[str, str]) -> LineUserProfile:
        self._ensure_open()
        self._loading = True
        try:
            self._user = await self.client.complete_login(query)
        finally:
            self._loading = False
        return self._user

    def logout(self) -> None:
        self._ensure_open()
        self.client.logout()
        self._user = None

    def __enter__(self) -> Self:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    async def __aenter__(self) -> Self:
        return self.open()

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
