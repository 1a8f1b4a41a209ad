from app.models.producto import Producto
from app.schemas.base import CamelModel, Money


class ProductoViewModel(CamelModel):
    """
    产品请求/响应模型

    新建时 productoId 必须为 0
    """
    producto_id: int = 0
    nombre: str
    descripcion: str
    precio: Money
    existencia: int

    @classmethod
    def from_record(cls, producto: Producto) -> "ProductoViewModel":
        return cls.model_validate(producto.to_dict())

    def to_record(self) -> Producto:
        return Producto(
            producto_id=self.producto_id,
            nombre=self.nombre,
            descripcion=self.descripcion,
            precio=self.precio,
            existencia=self.existencia,
        )
