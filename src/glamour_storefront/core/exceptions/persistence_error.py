from glamour_storefront.core.exceptions.infra_error import InfraError


class PersistenceError(InfraError):
    """Raised by store adapters when a read or write cannot be completed."""

    def __init__(self, message: str, retryable: bool = False):
        super().__init__(message)
        self.message = message
        self.retryable = retryable
