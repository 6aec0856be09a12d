# jobs/reset_role_permissions.py

from core.logging_config import logger
from core.permission_helpers import build_permission_resolver
from core.supabase_client import get_supabase_client


def run():
    """
    CLI entry point used while setting up an environment.
    Removes any dynamic role permission override so every built-in role
    uses the static permissions again.
    """
    client = get_supabase_client()
    if not client:
        raise RuntimeError("Supabase not configured")

    resolver = build_permission_resolver()
    if resolver.dynamic_matrix.reset_to_static():
        logger.info("Dynamic role permissions found and removed; static permissions restored")
    else:
        logger.info("No dynamic role permissions configured; static permissions already in use")


if __name__ == "__main__":
    run()
