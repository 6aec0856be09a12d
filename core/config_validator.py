# core/config_validator.py

from typing import List
from core.config import settings
from core.logging_config import logger
from core.permissions import ROLE_PERMISSIONS
from core.roles import ROLE_LEVELS, ROLE_METADATA, Role


def validate_required_config() -> List[str]:
    """
    Validate that all required environment variables are set.
    Returns list of missing required variables.
    """
    missing = []

    if not settings.SUPABASE_URL:
        missing.append("SUPABASE_URL")
    if not settings.SUPABASE_SERVICE_ROLE_KEY:
        missing.append("SUPABASE_SERVICE_ROLE_KEY")

    return missing


def validate_optional_config() -> List[str]:
    """
    Validate optional but recommended configuration.
    Returns list of warnings.
    """
    warnings = []

    if not settings.SUPABASE_ANON_KEY:
        warnings.append("SUPABASE_ANON_KEY (optional but recommended)")
    if settings.PERMISSIONS_CACHE_TTL_SECONDS <= 0:
        warnings.append("PERMISSIONS_CACHE_TTL_SECONDS <= 0 disables permission caching")

    return warnings


def validate_role_catalog() -> List[str]:
    """
    Every built-in role needs a hierarchy level, metadata and a non-empty
    static permission set. Returns a list of problems.
    """
    problems = []

    for role in Role:
        if role not in ROLE_LEVELS:
            problems.append(f"{role}: missing hierarchy level")
        if role not in ROLE_METADATA:
            problems.append(f"{role}: missing metadata")
        if not ROLE_PERMISSIONS.get(role):
            problems.append(f"{role}: missing static permissions")

    levels = list(ROLE_LEVELS.values())
    if len(levels) != len(set(levels)):
        problems.append("hierarchy levels must be unique")

    return problems


def validate_config_on_startup(require_store: bool = True):
    """
    Validate configuration on application startup.
    Raises RuntimeError if the role catalog is incomplete, or if store
    config is missing and `require_store` is set (otherwise it is logged).
    Logs warnings for optional config.
    """
    problems = validate_role_catalog()
    if problems:
        error_msg = f"Role catalog is incomplete: {'; '.join(problems)}"
        logger.error(error_msg)
        raise RuntimeError(error_msg)

    missing_required = validate_required_config()
    missing_optional = validate_optional_config()

    if missing_required:
        error_msg = f"Missing required environment variables: {', '.join(missing_required)}"
        logger.error(error_msg)
        if require_store:
            raise RuntimeError(error_msg)

    if missing_optional:
        for warning in missing_optional:
            logger.warning(f"Optional configuration missing: {warning}")

    logger.info("Configuration validation passed")
