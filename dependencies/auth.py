from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel
from supabase import Client

from core.supabase_client import get_supabase_client
from core.roles import Role


bearer_scheme = HTTPBearer()


# ============================================================
# Current User Model
# ============================================================
class CurrentUser(BaseModel):
    id: str
    email: str

    # Built-in identifier, custom role name, or legacy "ADMIN".
    # Not validated here: unknown roles simply have no permissions.
    role: str

    full_name: Optional[str] = None


# ============================================================
# AUTH DECODING (Supabase validates the JWT; we read metadata)
# ============================================================
def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
) -> CurrentUser:

    token = credentials.credentials

    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired authentication token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    client: Client = get_supabase_client()
    if not client:
        raise HTTPException(500, "Supabase client not configured")

    try:
        auth_resp = client.auth.get_user(token)
        if not auth_resp or not auth_resp.user:
            raise unauthorized
        auth_user = auth_resp.user
    except Exception:
        raise unauthorized

    email = auth_user.email
    metadata = auth_user.user_metadata or {}

    if not email:
        raise unauthorized

    role = metadata.get("role") or Role.CUSTOMER.value

    return CurrentUser(
        id=auth_user.id,
        email=email,
        role=str(role),
        full_name=metadata.get("full_name"),
    )
