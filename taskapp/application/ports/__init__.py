"""Ports (interfaces) required by the application layer."""

from taskapp.application.ports.document_store import (
    UNIQUE_KEYS,
    Document,
    DocumentStoreProtocol,
)
from taskapp.application.ports.password_hasher import PasswordHasherProtocol
from taskapp.application.ports.session_tokens import SessionTokenProtocol

__all__: list[str] = [
    "Document",
    "DocumentStoreProtocol",
    "PasswordHasherProtocol",
    "SessionTokenProtocol",
    "UNIQUE_KEYS",
]
