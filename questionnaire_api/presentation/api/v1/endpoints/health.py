from fastapi import APIRouter

router = APIRouter()


@router.get("", summary="Liveness check")
async def health() -> dict[str, str]:
    return {"status": "OK"}
