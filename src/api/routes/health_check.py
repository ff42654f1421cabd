from fastapi import APIRouter

from src.api.schemas import success

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    return success("Service is healthy", data={"status": "ok"})
