from glamour_storefront.core.exceptions.configuration_error import ConfigurationError
from glamour_storefront.core.exceptions.domain_error import DomainError
from glamour_storefront.core.exceptions.draft_validation_error import DraftValidationError
from glamour_storefront.core.exceptions.infra_error import InfraError
from glamour_storefront.core.exceptions.persistence_error import PersistenceError
from glamour_storefront.core.exceptions.provider_error import ProviderError
from glamour_storefront.core.exceptions.record_not_found_error import RecordNotFoundError
from glamour_storefront.core.exceptions.unique_constraint_error import UniqueConstraintError

__all__ = [
    "ConfigurationError",
    "DomainError",
    "DraftValidationError",
    "InfraError",
    "PersistenceError",
    "ProviderError",
    "RecordNotFoundError",
    "UniqueConstraintError",
]
