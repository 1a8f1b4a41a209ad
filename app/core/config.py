import os
import json
from typing import Any, Dict, List, Optional, Union

from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from pydantic import field_validator

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
env_path = os.path.join(project_root, '.env')
load_dotenv(env_path)


class Settings(BaseSettings):
    # 基本设置
    API_PREFIX: str = ""
    PROJECT_NAME: str = "PruebaTecnicaAPI"
    VERSION: str = "0.1.0"

    # CORS 设置
    CORS_ORIGINS: List[str] = ["*"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            # 先按JSON数组解析，失败再按逗号分隔
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                if v.startswith("[") and v.endswith("]"):
                    v = v.strip("[]").strip()
                    if v:
                        return [i.strip().strip('"\'') for i in v.split(",")]
                    return []
                return [i.strip() for i in v.split(",") if i.strip()]

        if isinstance(v, list):
            return v

        return []

    # 数据库设置
    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_USER: str = "root"
    DB_PASSWORD: str = "password"
    DB_NAME: str = os.getenv("DB_NAME", "pruebatecnica")

    # 完整连接串，设置后优先于上面的分项配置
    DATABASE_URI: Optional[str] = None

    DB_POOL_PRE_PING: bool = True
    DB_CONNECT_TIMEOUT: int = int(os.getenv("DB_CONNECT_TIMEOUT", 10))

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """
        获取数据库URI
        """
        if self.DATABASE_URI:
            return self.DATABASE_URI

        return f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @property
    def ENGINE_OPTIONS(self) -> Dict[str, Any]:
        """
        传给 create_engine 的连接参数
        """
        options: Dict[str, Any] = {"pool_pre_ping": self.DB_POOL_PRE_PING}
        if self.SQLALCHEMY_DATABASE_URI.startswith("mysql"):
            options["connect_args"] = {"connect_timeout": self.DB_CONNECT_TIMEOUT}
        return options

    # 日志配置
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.getenv("LOG_DIR", "logs")

    # 服务器启动配置
    HOST: str = "0.0.0.0"
    PORT: int = 8092
    RELOAD: bool = True

    class Config:
        case_sensitive = True
        env_file = ".env"


# 创建设置实例
settings = Settings()
