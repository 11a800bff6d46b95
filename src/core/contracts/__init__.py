"""
Contract Validation Module

JSON payload validation against the schemas packaged in schema/.
"""

from .validators import (
    SchemaLoader,
    validate_quantity,
)

__all__ = [
    # Classes
    "SchemaLoader",
    # Functions
    "validate_quantity",
]
