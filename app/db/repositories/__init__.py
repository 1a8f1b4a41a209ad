"""存储过程仓储导出"""

from .cliente_repository import ClienteRepository
from .producto_repository import ProductoRepository
from .orden_repository import OrdenRepository

__all__ = [
    "ClienteRepository",
    "ProductoRepository",
    "OrdenRepository",
]
