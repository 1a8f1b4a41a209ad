import logging

from app.db.repositories import OrdenRepository
from app.infrastructure.response import ServiceResult
from app.schemas.orden import OrdenRequest

logger = logging.getLogger(__name__)

CREAR_ORDEN_ERROR = "Error al crear la orden"
PROCESAR_ORDEN_ERROR = "Error al procesar la orden"


def classify_order_error(error_text: str) -> str:
    """
    按错误文本选择提示信息

    只做大小写敏感的子串判断，文本中恰好出现 "cliente" 也会被归为客户相关错误
    """
    return CREAR_ORDEN_ERROR if "cliente" in error_text else PROCESAR_ORDEN_ERROR


class OrdenService:
    """订单业务服务"""

    def __init__(self, repository: OrdenRepository):
        self.repository = repository

    def crear_orden(self, request: OrdenRequest) -> ServiceResult:
        """
        创建订单

        先做结构校验（ordenId 为 0、至少一条明细），通过后才调用存储过程；
        成功时 data 为订单头与明细的聚合 OrdenCreada
        """
        if request.orden_id != 0:
            return ServiceResult.error(CREAR_ORDEN_ERROR, ["El ordenId debe ser 0 para una nueva orden."])

        if not request.detalle:
            return ServiceResult.error(CREAR_ORDEN_ERROR, ["Debe tener al menos un detalle."])

        try:
            orden_creada = self.repository.crear_orden(request.cliente_id, request.detalles_json())
        except Exception as e:
            message = classify_order_error(str(e))
            logger.warning(f"创建订单失败 (cliente {request.cliente_id}): {str(e)}")
            return ServiceResult.error(message, [str(e)])

        if orden_creada is None:
            return ServiceResult.error(CREAR_ORDEN_ERROR, ["No se pudo crear la orden."])
        return ServiceResult.ok(data=orden_creada, message="Orden creada exitosamente")
