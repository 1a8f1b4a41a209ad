import logging
from typing import List, Optional

from app.db import scripts
from app.db.procedures import ProcedureExecutor, first_row, raise_for_status
from app.models.cliente import Cliente
from app.models.status import is_status_row

logger = logging.getLogger(__name__)


class ClienteRepository:
    """客户数据访问，每个方法只调用一个存储过程"""

    def __init__(self, executor: ProcedureExecutor):
        self.executor = executor

    def find(self, cliente_id: int) -> Optional[Cliente]:
        """
        按ID查询客户

        存储过程返回错误状态行或没有返回行时视为未找到
        """
        row = first_row(self.executor.call(scripts.CLIENTE_BUSCAR, [cliente_id]))
        if row is None or is_status_row(row):
            return None
        return Cliente.from_row(row)

    def insert(self, cliente: Cliente) -> Optional[Cliente]:
        # 客户ID由数据库生成，不传入
        row = first_row(self.executor.call(
            scripts.CLIENTE_INSERTAR,
            [cliente.nombre, cliente.identidad],
        ))
        raise_for_status(row, scripts.CLIENTE_INSERTAR)
        return Cliente.from_row(row) if row is not None else None

    def update(self, cliente: Cliente) -> Optional[Cliente]:
        row = first_row(self.executor.call(
            scripts.CLIENTE_ACTUALIZAR,
            [cliente.cliente_id, cliente.nombre, cliente.identidad],
        ))
        raise_for_status(row, scripts.CLIENTE_ACTUALIZAR)
        return Cliente.from_row(row) if row is not None else None

    def list(self) -> List[Cliente]:
        rows = self.executor.call(scripts.CLIENTES_LISTAR)
        if rows and is_status_row(rows[0]):
            logger.warning(f"{scripts.CLIENTES_LISTAR} 返回错误状态行，按空列表处理")
            return []
        return [Cliente.from_row(row) for row in rows]
