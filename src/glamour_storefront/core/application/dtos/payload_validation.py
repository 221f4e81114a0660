from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from glamour_storefront.core.exceptions.draft_validation_error import DraftValidationError

T = TypeVar("T", bound=BaseModel)


def validate_payload(model: type[T], payload: dict[str, Any]) -> T:
    """Validate a client payload, translating pydantic errors into DraftValidationError."""
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise DraftValidationError.from_pydantic(e) from e
