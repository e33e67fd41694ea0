"""
models package
- Purpose: Import all ORM models so metadata.create_all sees them.
- Important: tables only exist in Base.metadata once their model is imported.
"""

from jobly.models.company import Company
from jobly.models.job import Job

__all__ = [
    "Company",
    "Job",
]
