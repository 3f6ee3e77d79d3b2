"""
日志设置
"""
import logging
import sys

from .settings import get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(name: str = "gdcalc", level: str = None) -> logging.Logger:
    """
    日志器设置

    Args:
        name: 日志器名称 (通常为包名或模块名)
        level: 日志级别, 缺省时读取 GDCALC_LOG_LEVEL

    Returns:
        设置好的日志器
    """
    logger = logging.getLogger(name)

    # 已有处理器则直接返回 (避免重复输出)
    if logger.handlers:
        return logger

    level = (level or get_settings().LOG_LEVEL).upper()
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
