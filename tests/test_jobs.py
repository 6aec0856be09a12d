# tests/test_jobs.py

"""
Tests for maintenance jobs.
"""

from unittest.mock import Mock, patch

import pytest

from core.config import settings
from jobs import reset_role_permissions


def test_reset_job_removes_override(resolver, store, store_role_matrix):
    store_role_matrix({"MANAGER": []})

    with patch.object(reset_role_permissions, "get_supabase_client", return_value=Mock()), \
         patch.object(reset_role_permissions, "build_permission_resolver", return_value=resolver):
        reset_role_permissions.run()

    assert settings.ROLE_PERMISSIONS_SETTING_KEY not in store.documents


def test_reset_job_without_override(resolver, store):
    with patch.object(reset_role_permissions, "get_supabase_client", return_value=Mock()), \
         patch.object(reset_role_permissions, "build_permission_resolver", return_value=resolver):
        reset_role_permissions.run()

    assert store.documents == {}


def test_reset_job_requires_supabase():
    with patch.object(reset_role_permissions, "get_supabase_client", return_value=None):
        with pytest.raises(RuntimeError, match="Supabase not configured"):
            reset_role_permissions.run()
