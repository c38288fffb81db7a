from co2x.auth.session.client import LineLoginClient, build_placeholder_profile
from co2x.auth.session.context import AuthSession
from co2x.auth.session.store import MappingStorage, MemoryStorage, SessionStore, StorageProtocol

__all__ = [
    "AuthSession",
    "LineLoginClient",
    "MappingStorage",
    "MemoryStorage",
    "SessionStore",
    "StorageProtocol",
    "build_placeholder_profile",
]
