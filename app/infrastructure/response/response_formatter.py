from typing import Any, Dict, Optional, List


def standard_response(
    success: bool = True,
    message: str = "",
    errors: Optional[List[str]] = None,
    data: Any = None,
) -> Dict[str, Any]:
    """
    创建标准的响应格式

    参数:
        success: 业务是否成功
        message: 响应消息
        errors: 错误信息列表
        data: 响应数据，可以是任何类型

    返回:
        Dict[str, Any]: 标准格式的响应对象
    """
    return {
        "success": success,
        "message": message,
        "errors": list(errors or []),
        "data": data,
    }


def success_response(data: Any = None, message: str = "") -> Dict[str, Any]:
    """
    创建成功响应

    参数:
        data: 响应数据
        message: 成功消息

    返回:
        Dict[str, Any]: 标准格式的成功响应
    """
    return standard_response(success=True, message=message, errors=[], data=data)


def error_response(
    message: str = "Error al procesar la solicitud",
    errors: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """
    创建错误响应，失败时 data 恒为 None

    参数:
        message: 错误消息
        errors: 错误详情列表

    返回:
        Dict[str, Any]: 标准格式的错误响应
    """
    return standard_response(success=False, message=message, errors=errors, data=None)

