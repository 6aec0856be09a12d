from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    # -------------------------------------------------
    # General
    # -------------------------------------------------
    PROJECT_NAME: str = "PropFlow API"
    ENV: str = "development"

    # -------------------------------------------------
    # Frontend Domains
    # -------------------------------------------------
    FRONTEND_DOMAINS: List[str] = [
        "http://localhost:3000",
    ]

    # -------------------------------------------------
    # CORS (auto-built below)
    # -------------------------------------------------
    BACKEND_CORS_ORIGINS: List[str] = []

    # -------------------------------------------------
    # Supabase (Primary DB & Auth)
    # -------------------------------------------------
    SUPABASE_URL: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[str] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None

    # -------------------------------------------------
    # System settings (key/value documents)
    # -------------------------------------------------
    SYSTEM_SETTINGS_TABLE: str = "system_settings"
    ROLE_PERMISSIONS_SETTING_KEY: str = "role_permissions_config"
    CUSTOM_ROLES_SETTING_KEY: str = "custom_roles_config"

    # -------------------------------------------------
    # Permission caches
    # -------------------------------------------------
    PERMISSIONS_CACHE_TTL_SECONDS: int = Field(
        300,
        description="How long the dynamic matrix and custom roles are trusted before reload (default: 5 minutes)",
    )

    # -------------------------------------------------
    # Model Config
    # -------------------------------------------------
    class Config:
        case_sensitive = True
        # No env_file: deployments use real environment variables


# Instantiate settings
settings = Settings()

# -------------------------------------------------
# Build CORS list dynamically after loading settings
# -------------------------------------------------
cors_origins = []

for domain in settings.FRONTEND_DOMAINS:
    if not domain.startswith("http"):
        domain = f"https://{domain}"
    cors_origins.append(domain.rstrip("/"))

# remove duplicates
settings.BACKEND_CORS_ORIGINS = sorted(list(set(cors_origins)))
