from functools import lru_cache

from app.core.config import settings
from app.db.procedures import ProcedureExecutor


@lru_cache()
def get_executor() -> ProcedureExecutor:
    """
    获取存储过程执行器的依赖函数

    整个进程共用一个引擎，每次调用各自借用、归还连接
    """
    return ProcedureExecutor(settings.SQLALCHEMY_DATABASE_URI, **settings.ENGINE_OPTIONS)
