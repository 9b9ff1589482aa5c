"""In-memory stub implementations of application ports."""

from taskapp.infrastructure.stubs.document_store_stub import DocumentStoreStub

__all__: list[str] = ["DocumentStoreStub"]
