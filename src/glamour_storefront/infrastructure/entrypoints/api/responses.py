from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from glamour_storefront.core.application.dtos.operation_result import FailureKind, OperationResult

_FAILURE_STATUS = {
    FailureKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureKind.CONFLICT: status.HTTP_409_CONFLICT,
    FailureKind.STORAGE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def success(data: Any, status_code: int = status.HTTP_200_OK, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": True, "data": data, **extra})


def failure(error: str, status_code: int, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error, **extra})


def from_result(result: OperationResult, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    if result.success:
        return JSONResponse(status_code=success_status, content=result.to_payload())
    code = _FAILURE_STATUS.get(result.failure, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(status_code=code, content=result.to_payload())
