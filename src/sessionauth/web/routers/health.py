from fastapi import APIRouter
from pydantic import BaseModel, Field

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str = Field(..., description="Always 'ok' while the process serves requests")
    message: str


@router.get(
    "/health",
    summary="Health check",
    operation_id="healthCheck",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", message="Server is healthy.")
