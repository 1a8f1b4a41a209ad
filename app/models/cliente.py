from dataclasses import dataclass
from typing import Dict, Any, Mapping


@dataclass(frozen=True)
class Cliente:
    """
    客户记录

    对应 SP_Cliente_* 与 SP_Clientes_Listar 返回的行
    """
    cliente_id: int
    nombre: str
    identidad: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Cliente":
        return cls(
            cliente_id=int(row["ClienteId"]),
            nombre=row["Nombre"],
            identidad=row["Identidad"],
        )

    def to_dict(self) -> Dict[str, Any]:
        """将客户转换为字典表示形式"""
        return {
            "cliente_id": self.cliente_id,
            "nombre": self.nombre,
            "identidad": self.identidad,
        }
