import logging

from app.db.repositories import ProductoRepository
from app.infrastructure.response import ServiceResult
from app.models.producto import Producto

logger = logging.getLogger(__name__)


class ProductoService:
    """产品业务服务"""

    def __init__(self, repository: ProductoRepository):
        self.repository = repository

    def listar(self) -> ServiceResult:
        try:
            productos = self.repository.list()
        except Exception as e:
            logger.warning(f"获取产品列表失败，返回空列表: {str(e)}")
            productos = []
        return ServiceResult.ok(data=productos)

    def buscar(self, producto_id: int) -> ServiceResult:
        try:
            producto = self.repository.find(producto_id)
        except Exception as e:
            logger.error(f"查询产品 {producto_id} 失败: {str(e)}")
            return ServiceResult.error("Error al buscar el producto", [str(e)])

        if producto is None:
            return ServiceResult.error(
                "Producto no encontrado",
                ["No existe un producto con el ID especificado"],
            )
        return ServiceResult.ok(data=producto)

    def insertar(self, producto: Producto) -> ServiceResult:
        if producto.producto_id != 0:
            return ServiceResult.error(
                "Error al crear el producto",
                ["El productoId debe ser 0 para un nuevo producto."],
            )

        try:
            creado = self.repository.insert(producto)
        except Exception as e:
            logger.warning(f"创建产品失败: {str(e)}")
            return ServiceResult.error("Error al crear el producto", [str(e)])

        if creado is None:
            return ServiceResult.error("Error al crear el producto", ["No se pudo insertar el producto."])
        return ServiceResult.ok(data=creado, message="Producto creado exitosamente")

    def actualizar(self, producto: Producto) -> ServiceResult:
        try:
            actualizado = self.repository.update(producto)
        except Exception as e:
            logger.warning(f"更新产品 {producto.producto_id} 失败: {str(e)}")
            return ServiceResult.error("Error al actualizar el producto", [str(e)])

        if actualizado is None:
            return ServiceResult.error("Error al actualizar el producto", ["No se pudo actualizar el producto."])
        return ServiceResult.ok(data=actualizado, message="Producto actualizado exitosamente")
