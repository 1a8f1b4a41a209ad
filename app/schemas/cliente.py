from app.models.cliente import Cliente
from app.schemas.base import CamelModel


class ClienteViewModel(CamelModel):
    """
    客户请求/响应模型

    新建时 clienteId 必须为 0
    """
    cliente_id: int = 0
    nombre: str
    identidad: str

    @classmethod
    def from_record(cls, cliente: Cliente) -> "ClienteViewModel":
        return cls.model_validate(cliente.to_dict())

    def to_record(self) -> Cliente:
        return Cliente(
            cliente_id=self.cliente_id,
            nombre=self.nombre,
            identidad=self.identidad,
        )
