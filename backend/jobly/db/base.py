"""
db/base.py
- Purpose: Provide Base + ensure models are imported for schema creation.
"""

from jobly.models.base import Base
import jobly.models  # noqa: F401  (ensures models are imported)

__all__ = ["Base"]
