from fastapi import APIRouter

from printlog.core.utils import utc_now_iso

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health():
    return {
        "success": True,
        "message": "3D Printing Database Server is running",
        "timestamp": utc_now_iso(),
    }
