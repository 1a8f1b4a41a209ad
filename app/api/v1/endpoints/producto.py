"""
产品相关API接口模块

提供产品的列表、查询、新建与更新接口
"""
import logging
from typing import List

from fastapi import APIRouter, Depends

from app.api.dependencies import get_producto_service
from app.models.producto import Producto
from app.schemas.producto import ProductoViewModel
from app.services import ProductoService

logger = logging.getLogger(__name__)

router = APIRouter()


def _serialize(producto: Producto) -> dict:
    return ProductoViewModel.from_record(producto).to_json_dict()


def _serialize_list(productos: List[Producto]) -> list:
    return [_serialize(producto) for producto in productos]


@router.get("/Listar")
def listar_productos(service: ProductoService = Depends(get_producto_service)):
    """获取全部产品，失败时返回空列表"""
    return service.listar().to_response(_serialize_list)


@router.get("/Buscar/{id}")
def buscar_producto(id: int, service: ProductoService = Depends(get_producto_service)):
    """根据ID查询产品"""
    return service.buscar(id).to_response(_serialize)


@router.post("/Insertar")
def insertar_producto(item: ProductoViewModel, service: ProductoService = Depends(get_producto_service)):
    """新建产品，productoId 必须为 0"""
    return service.insertar(item.to_record()).to_response(_serialize)


@router.put("/Actualizar/{id}")
def actualizar_producto(id: int, item: ProductoViewModel, service: ProductoService = Depends(get_producto_service)):
    """更新产品，路径中的ID覆盖请求体中的 productoId"""
    item.producto_id = id
    return service.actualizar(item.to_record()).to_response(_serialize)
