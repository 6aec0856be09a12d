# -------------------------
# Enums
# -------------------------
# Role payloads live in models.role; they are not re-exported here because
# they depend on core.permissions, which itself imports models.enums.
from .enums import BaseStrEnum
