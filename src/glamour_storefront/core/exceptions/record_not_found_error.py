from glamour_storefront.core.exceptions.domain_error import DomainError


class RecordNotFoundError(DomainError):
    def __init__(self, entity: str, identifier: str):
        super().__init__(f"{entity} not found: {identifier}")
        self.entity = entity
        self.identifier = identifier
