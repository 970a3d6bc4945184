"""
Domain layer - Business entities, models, schemas, mappers and enums.
"""

from domain import enums, models, schemas, mappers

__all__ = ["enums", "models", "schemas", "mappers"]
