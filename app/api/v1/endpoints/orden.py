"""
订单相关API接口模块
"""
import logging

from fastapi import APIRouter, Depends

from app.api.dependencies import get_orden_service
from app.models.orden import OrdenCreada
from app.schemas.orden import OrdenRequest, OrdenViewModel
from app.services import OrdenService

logger = logging.getLogger(__name__)

router = APIRouter()


def _serialize(orden_creada: OrdenCreada) -> dict:
    return OrdenViewModel.from_record(orden_creada).to_json_dict()


# 创建订单接口
@router.post("/Insertar")
def insertar_orden(item: OrdenRequest, service: OrdenService = Depends(get_orden_service)):
    """
    创建订单

    Args:
        item (OrdenRequest): ordenId 必须为 0，clienteId，以及至少一条 {productoId, cantidad} 明细

    Returns:
        dict: 成功时 data 为订单头与全部明细
            {
                "success": true,
                "message": "Orden creada exitosamente",
                "errors": [],
                "data": {
                    "ordenId": ..., "clienteId": ..., "clienteNombre": ...,
                    "subtotal": ..., "impuesto": ..., "total": ...,
                    "fechaCreacion": ...,
                    "detalles": [...]
                }
            }
    """
    return service.crear_orden(item).to_response(_serialize)
