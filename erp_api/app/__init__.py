"""
Application package initializer.

The API is organised by layer (``core``, ``schemas``, ``services``,
``api``) and, within each layer, by business domain.  Each domain
exposes a router defined in ``api/v1/endpoints`` backed by a service
class in ``services`` that keeps its records in memory.
"""

from .main import app  # noqa: F401
