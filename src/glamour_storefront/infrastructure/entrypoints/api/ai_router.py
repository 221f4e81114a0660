import structlog
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from glamour_storefront.infrastructure.entrypoints.api.dependencies import get_container
from glamour_storefront.infrastructure.entrypoints.api.responses import failure, success
from glamour_storefront.infrastructure.resolution.container import StorefrontContainer

logger = structlog.get_logger()
router = APIRouter(prefix="/api/ai", tags=["ai"])


class DescriptionRequest(BaseModel):
    name: str = ""
    category: str = ""
    type: str = ""
    collection: str = ""


@router.post("/generate-description")
async def generate_description(
    body: DescriptionRequest,
    container: StorefrontContainer = Depends(get_container),
):
    if not all(v.strip() for v in (body.name, body.category, body.type, body.collection)):
        return failure("Missing required fields: name, category, type, collection", status.HTTP_400_BAD_REQUEST)

    description = await container.description_writer.write(
        body.name.strip(), body.type.strip(), body.category.strip(), body.collection.strip()
    )
    if description is None:
        logger.warning("AI description unavailable", product_name=body.name)
        return failure("Failed to generate description", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return success({"description": description})
