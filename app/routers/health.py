from datetime import datetime
from fastapi import APIRouter

router = APIRouter()

@router.get("")
def health():
    # Check si l'API est up
    return {
        "success": True,
        "message": "Page builder API is running",
        "timestamp": datetime.utcnow().isoformat(),
    }
