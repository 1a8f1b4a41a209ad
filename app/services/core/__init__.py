"""
Core Services Module

Provides the CRUD services for clients, products and orders.
Each service wraps one repository and answers a ServiceResult envelope.
"""

from .cliente_service import ClienteService
from .producto_service import ProductoService
from .orden_service import OrdenService

__all__ = [
    "ClienteService",
    "ProductoService",
    "OrdenService",
]
