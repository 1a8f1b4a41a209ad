from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import sys
import traceback
from typing import Callable

from app.api.v1.api import api_router
from app.core.config import settings
from app.infrastructure.response import success_response, error_response

# 配置日志（通过 run.py 启动时根日志已配置，这里不会覆盖）
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Clientes, Productos y Órdenes sobre procedimientos almacenados"
)

# 配置CORS - 重要: 必须在其他中间件之前添加
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _validation_messages(exc: RequestValidationError) -> list:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg')}")
    return messages


# 请求结构不合法，统一返回200状态码，错误信息在响应体中表示
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"请求参数校验失败 {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        content=error_response(message="Error de validación", errors=_validation_messages(exc)),
        status_code=200
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        content=error_response(message=str(exc.detail), errors=[str(exc.detail)]),
        status_code=200
    )


# 兜底中间件，未处理的异常也包装为统一格式
@app.middleware("http")
async def uniform_response_middleware(request: Request, call_next: Callable) -> Response:
    try:
        return await call_next(request)
    except Exception as e:
        logger.error(f"未处理的异常 {request.method} {request.url.path}: {str(e)}")
        logger.error(traceback.format_exc())
        return JSONResponse(
            content=error_response(message="Error interno del servidor", errors=[str(e)]),
            status_code=200  # 统一返回200状态码
        )


# 包含API路由
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    """健康检查接口"""
    return success_response(
        data={
            "status": "online",
            "version": settings.VERSION
        },
        message=f"{settings.PROJECT_NAME} en ejecución"
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
