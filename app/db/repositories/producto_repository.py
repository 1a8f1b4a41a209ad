import logging
from typing import List, Optional

from app.db import scripts
from app.db.procedures import ProcedureExecutor, first_row, raise_for_status
from app.models.producto import Producto
from app.models.status import is_status_row

logger = logging.getLogger(__name__)


class ProductoRepository:
    """产品数据访问"""

    def __init__(self, executor: ProcedureExecutor):
        self.executor = executor

    def find(self, producto_id: int) -> Optional[Producto]:
        row = first_row(self.executor.call(scripts.PRODUCTO_BUSCAR, [producto_id]))
        if row is None or is_status_row(row):
            return None
        return Producto.from_row(row)

    def insert(self, producto: Producto) -> Optional[Producto]:
        row = first_row(self.executor.call(
            scripts.PRODUCTO_INSERTAR,
            [producto.nombre, producto.descripcion, producto.precio, producto.existencia],
        ))
        raise_for_status(row, scripts.PRODUCTO_INSERTAR)
        return Producto.from_row(row) if row is not None else None

    def update(self, producto: Producto) -> Optional[Producto]:
        row = first_row(self.executor.call(
            scripts.PRODUCTO_ACTUALIZAR,
            [
                producto.producto_id,
                producto.nombre,
                producto.descripcion,
                producto.precio,
                producto.existencia,
            ],
        ))
        raise_for_status(row, scripts.PRODUCTO_ACTUALIZAR)
        return Producto.from_row(row) if row is not None else None

    def list(self) -> List[Producto]:
        rows = self.executor.call(scripts.PRODUCTOS_LISTAR)
        if rows and is_status_row(rows[0]):
            logger.warning(f"{scripts.PRODUCTOS_LISTAR} 返回错误状态行，按空列表处理")
            return []
        return [Producto.from_row(row) for row in rows]
