"""
客户相关API接口模块

提供客户的列表、查询、新建与更新接口。所有接口均返回 HTTP 200，
业务结果由响应体中的 success / message / errors / data 表示。
"""
import logging
from typing import List

from fastapi import APIRouter, Depends

from app.api.dependencies import get_cliente_service
from app.models.cliente import Cliente
from app.schemas.cliente import ClienteViewModel
from app.services import ClienteService

# 配置日志记录器
logger = logging.getLogger(__name__)

# 创建API路由实例
router = APIRouter()


def _serialize(cliente: Cliente) -> dict:
    return ClienteViewModel.from_record(cliente).to_json_dict()


def _serialize_list(clientes: List[Cliente]) -> list:
    return [_serialize(cliente) for cliente in clientes]


# 获取客户列表接口
@router.get("/Listar")
def listar_clientes(service: ClienteService = Depends(get_cliente_service)):
    """
    获取全部客户

    Returns:
        dict: data 为客户列表；数据库不可用时为空列表，success 仍为 true
    """
    return service.listar().to_response(_serialize_list)


# 获取客户详情接口
@router.get("/Buscar/{id}")
def buscar_cliente(id: int, service: ClienteService = Depends(get_cliente_service)):
    """
    根据ID查询客户

    Args:
        id (int): 客户ID

    Returns:
        dict: 找到时 data 为客户；否则 message 为 "Cliente no encontrado"
    """
    return service.buscar(id).to_response(_serialize)


# 创建客户接口
@router.post("/Insertar")
def insertar_cliente(item: ClienteViewModel, service: ClienteService = Depends(get_cliente_service)):
    """
    新建客户

    Args:
        item (ClienteViewModel): clienteId 必须为 0

    Returns:
        dict: data 为带有新ID的客户，或失败时的错误列表
    """
    return service.insertar(item.to_record()).to_response(_serialize)


# 更新客户接口
@router.put("/Actualizar/{id}")
def actualizar_cliente(id: int, item: ClienteViewModel, service: ClienteService = Depends(get_cliente_service)):
    """
    更新客户

    以路径中的ID为准，覆盖请求体中的 clienteId
    """
    item.cliente_id = id
    return service.actualizar(item.to_record()).to_response(_serialize)
