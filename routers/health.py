# routers/health.py

from fastapi import APIRouter
from core.supabase_client import ping_supabase

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


# -----------------------------------------------------
# GET /health/db
# Checks Supabase connection + settings table query
# No auth required
# -----------------------------------------------------
@router.get("/db", summary="Supabase / DB health check")
def health_db():
    """
    Reads one row of the system settings table, where the role permission
    override and the custom role list are stored. "not_configured" means the
    permission engine is running on the static matrix only.
    """
    try:
        status = ping_supabase()
        return {
            "service": "Supabase",
            "status": status.get("status", "unknown"),
            "details": status,
        }

    except Exception as e:
        return {
            "service": "Supabase",
            "status": "error",
            "error": str(e),
        }


# -----------------------------------------------------
# GET /health/app
# Simple API health check for uptime monitors
# -----------------------------------------------------
@router.get("/app", summary="App health check")
async def health_app():
    return {
        "service": "PropFlow API",
        "status": "ok",
    }
