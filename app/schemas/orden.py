import json
from datetime import datetime
from typing import List, Optional

from app.models.orden import OrdenCreada
from app.schemas.base import CamelModel, Money


class DetalleOrdenRequest(CamelModel):
    """订单明细请求"""
    producto_id: int
    cantidad: int


class OrdenRequest(CamelModel):
    """
    创建订单请求

    ordenId 必须为 0，detalle 至少一条
    """
    orden_id: int = 0
    cliente_id: int
    detalle: Optional[List[DetalleOrdenRequest]] = None

    def detalles_json(self) -> str:
        """存储过程接收 camelCase 的JSON数组"""
        return json.dumps([detalle.to_json_dict() for detalle in self.detalle or []])


class DetalleOrdenViewModel(CamelModel):
    detalle_orden_id: int
    orden_id: int
    producto_id: int
    producto_nombre: str
    cantidad: int
    subtotal: Money
    impuesto: Money
    total: Money


class OrdenViewModel(CamelModel):
    """订单响应模型，包含订单头与全部明细"""
    orden_id: int
    cliente_id: int
    cliente_nombre: str
    subtotal: Money
    impuesto: Money
    total: Money
    fecha_creacion: datetime
    detalles: List[DetalleOrdenViewModel] = []

    @classmethod
    def from_record(cls, orden_creada: OrdenCreada) -> "OrdenViewModel":
        return cls.model_validate(orden_creada.to_dict())
