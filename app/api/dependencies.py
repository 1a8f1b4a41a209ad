"""
API Dependencies

Provides dependency injection for services and the stored procedure executor.
This centralizes service creation and management for API endpoints.
"""

from fastapi import Depends

from app.db.procedures import ProcedureExecutor
from app.db.repositories import ClienteRepository, ProductoRepository, OrdenRepository
from app.db.session import get_executor
from app.services import ClienteService, ProductoService, OrdenService


def get_cliente_service(executor: ProcedureExecutor = Depends(get_executor)) -> ClienteService:
    """
    Get Cliente Service instance bound to the procedure executor

    Returns:
        ClienteService: Configured client service
    """
    return ClienteService(ClienteRepository(executor))


def get_producto_service(executor: ProcedureExecutor = Depends(get_executor)) -> ProductoService:
    """
    Get Producto Service instance bound to the procedure executor

    Returns:
        ProductoService: Configured product service
    """
    return ProductoService(ProductoRepository(executor))


def get_orden_service(executor: ProcedureExecutor = Depends(get_executor)) -> OrdenService:
    """
    Get Orden Service instance bound to the procedure executor

    Returns:
        OrdenService: Configured order service
    """
    return OrdenService(OrdenRepository(executor))
