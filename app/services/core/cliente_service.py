import logging

from app.db.repositories import ClienteRepository
from app.infrastructure.response import ServiceResult
from app.models.cliente import Cliente

logger = logging.getLogger(__name__)


class ClienteService:
    """
    客户业务服务

    业务规则都在存储过程里，这里只做一项结构校验，并把异常转换为失败结果
    """

    def __init__(self, repository: ClienteRepository):
        self.repository = repository

    def listar(self) -> ServiceResult:
        """获取客户列表，任何失败都返回空列表"""
        try:
            clientes = self.repository.list()
        except Exception as e:
            logger.warning(f"获取客户列表失败，返回空列表: {str(e)}")
            clientes = []
        return ServiceResult.ok(data=clientes)

    def buscar(self, cliente_id: int) -> ServiceResult:
        try:
            cliente = self.repository.find(cliente_id)
        except Exception as e:
            logger.error(f"查询客户 {cliente_id} 失败: {str(e)}")
            return ServiceResult.error("Error al buscar el cliente", [str(e)])

        if cliente is None:
            return ServiceResult.error(
                "Cliente no encontrado",
                ["No existe un cliente con el ID especificado"],
            )
        return ServiceResult.ok(data=cliente)

    def insertar(self, cliente: Cliente) -> ServiceResult:
        if cliente.cliente_id != 0:
            return ServiceResult.error(
                "Error al crear el cliente",
                ["El clienteId debe ser 0 para un nuevo cliente."],
            )

        try:
            creado = self.repository.insert(cliente)
        except Exception as e:
            logger.warning(f"创建客户失败: {str(e)}")
            return ServiceResult.error("Error al crear el cliente", [str(e)])

        if creado is None:
            return ServiceResult.error("Error al crear el cliente", ["No se pudo insertar el cliente."])
        return ServiceResult.ok(data=creado, message="Cliente creado exitosamente")

    def actualizar(self, cliente: Cliente) -> ServiceResult:
        try:
            actualizado = self.repository.update(cliente)
        except Exception as e:
            logger.warning(f"更新客户 {cliente.cliente_id} 失败: {str(e)}")
            return ServiceResult.error("Error al actualizar el cliente", [str(e)])

        if actualizado is None:
            return ServiceResult.error("Error al actualizar el cliente", ["No se pudo actualizar el cliente."])
        return ServiceResult.ok(data=actualizado, message="Cliente actualizado exitosamente")
