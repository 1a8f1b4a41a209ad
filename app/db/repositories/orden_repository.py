import logging
from typing import Optional

from app.db import scripts
from app.db.procedures import ProcedureExecutor, first_row, raise_for_status
from app.models.orden import Orden, DetalleOrden, OrdenCreada

logger = logging.getLogger(__name__)


class OrdenRepository:
    """订单数据访问"""

    def __init__(self, executor: ProcedureExecutor):
        self.executor = executor

    def crear_orden(self, cliente_id: int, detalles_json: str) -> Optional[OrdenCreada]:
        """
        创建订单及其全部明细

        SP_Ordenes_Crear 返回两个结果集:
            1. 新建的订单头，或一行错误状态
            2. 订单明细，按插入顺序

        Args:
            cliente_id: 客户ID
            detalles_json: 明细的JSON数组 [{"productoId": .., "cantidad": ..}]

        Returns:
            OrdenCreada: 订单头与明细的聚合；存储过程没有返回订单头时为 None

        Raises:
            ProcedureError: 第一个结果集是错误状态行
        """
        result_sets = self.executor.call_multi(scripts.ORDENES_CREAR, [cliente_id, detalles_json])

        header = first_row(result_sets[0]) if result_sets else None
        # 出错时第二个结果集已被执行器读完并丢弃
        raise_for_status(header, scripts.ORDENES_CREAR)
        if header is None:
            logger.warning(f"{scripts.ORDENES_CREAR} 没有返回订单头")
            return None

        detail_rows = result_sets[1] if len(result_sets) > 1 else []
        orden = Orden.from_row(header)
        detalles = tuple(DetalleOrden.from_row(row) for row in detail_rows)
        logger.info(f"订单 {orden.orden_id} 已创建，明细 {len(detalles)} 条")
        return OrdenCreada(orden=orden, detalles=detalles)
