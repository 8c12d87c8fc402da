"""Use cases orchestrating conversion, persistence and indexing."""

from entitymap.core.use_cases.load_document import LoadDocumentUseCase
from entitymap.core.use_cases.store_document import StoreDocumentUseCase

__all__ = ["LoadDocumentUseCase", "StoreDocumentUseCase"]
