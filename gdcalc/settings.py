"""
环境变量设置
"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # 默认赋分数据集 (留空则取注册表第一项)
    DEFAULT_DATASET: str = ""

    # 原始分越界时直接报错, 而不是按表内最高/最低节点截断
    STRICT_INPUT: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "GDCALC_"
        case_sensitive = True
        extra = "ignore"  # .env 中的其他变量忽略


@lru_cache()
def get_settings() -> Settings:
    return Settings()
