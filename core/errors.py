# core/errors.py

from fastapi import HTTPException

from core.logging_config import logger


class PermissionConfigError(Exception):
    """
    A permission document could not be read or decoded.

    Raised inside the permission engine only; the engine catches it and
    falls back to defaults, so authorization callers never see it.
    """


def extract_store_error(error: Exception) -> str:
    """
    Safely extract readable details from Supabase Python client errors.
    Handles:
      • PostgREST errors
      • Generic Python exceptions
    """

    # Case 1: errors carrying a .message attribute (PostgREST APIError)
    if hasattr(error, "message"):
        try:
            return str(error.message)
        except Exception:
            pass

    # Case 2: errors with args (common)
    if hasattr(error, "args") and error.args:
        try:
            return str(error.args[0])
        except Exception:
            pass

    # Case 3: Plain string fallback
    try:
        return str(error)
    except Exception:
        return "Unknown store error"


def handle_store_error(error: Exception, operation: str = "Database operation", status_code: int = 500) -> HTTPException:
    """
    Handle settings-store write errors with consistent formatting.
    Returns HTTPException (doesn't raise) so caller can customize or re-raise.

    Args:
        error: The exception that occurred
        operation: Description of what operation failed (e.g., "Failed to save custom roles")
        status_code: HTTP status code (default 500)

    Returns:
        HTTPException with standardized error message
    """
    error_detail = extract_store_error(error)
    logger.error(f"{operation}: {error_detail}")

    error_lower = error_detail.lower()
    if "duplicate" in error_lower or "unique" in error_lower:
        return HTTPException(status_code=400, detail=f"{operation}: Record already exists")
    elif "not found" in error_lower or "does not exist" in error_lower:
        return HTTPException(status_code=404, detail=f"{operation}: Resource not found")
    else:
        return HTTPException(status_code=status_code, detail=f"{operation} failed")


def forbidden(detail: str = "Insufficient permissions") -> HTTPException:
    """The single user-facing rejection for failed authorization checks."""
    return HTTPException(status_code=403, detail=detail)
