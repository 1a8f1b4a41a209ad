from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Dict, Any, Mapping, Tuple


def _money(value: Any) -> Decimal:
    return Decimal(str(value))


@dataclass(frozen=True)
class Orden:
    """
    订单头

    SP_Ordenes_Crear 第一个结果集的数据行，金额均由存储过程计算
    """
    orden_id: int
    cliente_id: int
    cliente_nombre: str
    subtotal: Decimal
    impuesto: Decimal
    total: Decimal
    fecha_creacion: datetime

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Orden":
        return cls(
            orden_id=int(row["OrdenId"]),
            cliente_id=int(row["ClienteId"]),
            cliente_nombre=row["ClienteNombre"],
            subtotal=_money(row["Subtotal"]),
            impuesto=_money(row["Impuesto"]),
            total=_money(row["Total"]),
            fecha_creacion=row["FechaCreacion"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "orden_id": self.orden_id,
            "cliente_id": self.cliente_id,
            "cliente_nombre": self.cliente_nombre,
            "subtotal": self.subtotal,
            "impuesto": self.impuesto,
            "total": self.total,
            "fecha_creacion": self.fecha_creacion,
        }


@dataclass(frozen=True)
class DetalleOrden:
    """
    订单明细

    SP_Ordenes_Crear 第二个结果集的每一行，产品名称在下单时冗余保存
    """
    detalle_orden_id: int
    orden_id: int
    producto_id: int
    producto_nombre: str
    cantidad: int
    subtotal: Decimal
    impuesto: Decimal
    total: Decimal

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "DetalleOrden":
        return cls(
            detalle_orden_id=int(row["DetalleOrdenId"]),
            orden_id=int(row["OrdenId"]),
            producto_id=int(row["ProductoId"]),
            producto_nombre=row["ProductoNombre"],
            cantidad=int(row["Cantidad"]),
            subtotal=_money(row["Subtotal"]),
            impuesto=_money(row["Impuesto"]),
            total=_money(row["Total"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "detalle_orden_id": self.detalle_orden_id,
            "orden_id": self.orden_id,
            "producto_id": self.producto_id,
            "producto_nombre": self.producto_nombre,
            "cantidad": self.cantidad,
            "subtotal": self.subtotal,
            "impuesto": self.impuesto,
            "total": self.total,
        }


@dataclass(frozen=True)
class OrdenCreada:
    """订单头与全部明细的聚合结果，明细保持数据库返回的顺序"""
    orden: Orden
    detalles: Tuple[DetalleOrden, ...]

    def to_dict(self) -> Dict[str, Any]:
        result = self.orden.to_dict()
        result["detalles"] = [detalle.to_dict() for detalle in self.detalles]
        return result
