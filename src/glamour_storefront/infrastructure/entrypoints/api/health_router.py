from importlib.metadata import PackageNotFoundError, version

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
def health_check():
    try:
        app_version = version("glamour-storefront")
    except PackageNotFoundError:
        app_version = "0.0.0"

    return {
        "status": "ok",
        "service": "glamour-storefront",
        "version": app_version,
    }


@router.get("/api/test")
def api_test():
    return {"success": True, "message": "API is working"}
