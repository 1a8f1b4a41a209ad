from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Any, Mapping


@dataclass(frozen=True)
class Producto:
    """
    产品记录

    价格保留两位小数，库存由存储过程维护
    """
    producto_id: int
    nombre: str
    descripcion: str
    precio: Decimal
    existencia: int

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Producto":
        return cls(
            producto_id=int(row["ProductoId"]),
            nombre=row["Nombre"],
            descripcion=row["Descripcion"],
            precio=Decimal(str(row["Precio"])),
            existencia=int(row["Existencia"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        """将产品转换为字典表示形式"""
        return {
            "producto_id": self.producto_id,
            "nombre": self.nombre,
            "descripcion": self.descripcion,
            "precio": self.precio,
            "existencia": self.existencia,
        }
