from fastapi import APIRouter

from app.api.v1.endpoints import cliente, producto, orden


api_router = APIRouter()

# 包含各模块的路由

api_router.include_router(cliente.router, prefix="/Cliente", tags=["Cliente"])
api_router.include_router(producto.router, prefix="/Producto", tags=["Producto"])
api_router.include_router(orden.router, prefix="/Orden", tags=["Orden"])
