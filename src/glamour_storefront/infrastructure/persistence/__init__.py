from glamour_storefront.infrastructure.persistence.in_memory_document_store import InMemoryDocumentStore
from glamour_storefront.infrastructure.persistence.json_file_document_store import JsonFileDocumentStore

__all__ = ["InMemoryDocumentStore", "JsonFileDocumentStore"]
