"""
Services Layer

Provides the business services. Real business rules live in the
database stored procedures; services validate request structure and
translate data-access failures into ServiceResult envelopes.
"""

from .core import ClienteService, ProductoService, OrdenService

__all__ = [
    "ClienteService",
    "ProductoService",
    "OrdenService",
]
