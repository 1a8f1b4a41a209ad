import logging
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url

logger = logging.getLogger(__name__)


def create_db_engine(database_uri: str, **options: Any) -> Engine:
    """
    根据连接串创建数据库引擎

    连接串由调用方传入，不读取全局配置
    """
    engine_options = {
        "pool_pre_ping": True,
        "pool_recycle": 3600,
        # 启用回显SQL语句，便于调试
        "echo": False,
    }
    engine_options.update(options)

    engine = create_engine(database_uri, **engine_options)
    logger.info(f"数据库引擎已创建: {make_url(database_uri).render_as_string(hide_password=True)}")
    return engine
