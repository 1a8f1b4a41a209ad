"""存储过程结果行对应的领域记录"""

from .cliente import Cliente
from .producto import Producto
from .orden import Orden, DetalleOrden, OrdenCreada
from .status import StatusRow, is_status_row

__all__ = [
    "Cliente",
    "Producto",
    "Orden",
    "DetalleOrden",
    "OrdenCreada",
    "StatusRow",
    "is_status_row",
]
