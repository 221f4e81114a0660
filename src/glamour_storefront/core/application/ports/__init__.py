from glamour_storefront.core.application.ports.document_store_port import DocumentStorePort
from glamour_storefront.core.application.ports.record_filter import RecordFilter
from glamour_storefront.core.application.ports.text_generation_port import TextGenerationPort

__all__ = ["DocumentStorePort", "RecordFilter", "TextGenerationPort"]
