"""Application-wide extensions.

Re-exported from ``core.extensions`` so modules can import them without
reaching into the infrastructure layer or causing circular imports.
"""

from .core.extensions import db, migrate

__all__ = ["db", "migrate"]
