import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from arena.core.config import settings

# 日志格式
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_NAME = "arena"


class LevelFilter(logging.Filter):
    """只通过指定等级范围内的日志记录"""
    def __init__(self, min_level: int, max_level: int = None):
        super().__init__()
        self.min_level = min_level
        self.max_level = max_level if max_level is not None else min_level

    def filter(self, record: logging.LogRecord) -> bool:
        return self.min_level <= record.levelno <= self.max_level


def _rotating_handler(filename: str, level: int, max_level: int) -> RotatingFileHandler:
    # 最大 10MB，保留 5 个备份
    handler = RotatingFileHandler(
        os.path.join(settings.log_dir, filename),
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8"
    )
    handler.setLevel(level)
    handler.addFilter(LevelFilter(level, max_level))
    return handler


def _configure(logger: logging.Logger) -> logging.Logger:
    # 避免重复添加 handler
    if logger.handlers:
        return logger

    logger.setLevel(settings.log_level)
    logger.propagate = False  # 阻止日志向上传播到 root logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # 控制台输出
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 配置了日志目录时才写文件
    if settings.log_dir:
        os.makedirs(settings.log_dir, exist_ok=True)

        # info.log - 仅 INFO
        info_handler = _rotating_handler("info.log", logging.INFO, logging.INFO)
        info_handler.setFormatter(formatter)
        logger.addHandler(info_handler)

        # error.log - ERROR 及以上
        error_handler = _rotating_handler("error.log", logging.ERROR, logging.CRITICAL)
        error_handler.setFormatter(formatter)
        logger.addHandler(error_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """获取日志记录器，name 非空时返回 arena 下的子 logger"""
    root = _configure(logging.getLogger(ROOT_NAME))
    if not name:
        return root
    return root.getChild(name)


def uvicorn_log_config(level: str = None) -> dict:
    """uvicorn 日志统一输出到 stdout，格式与服务日志一致"""
    level = level or settings.log_level
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": LOG_FORMAT,
                "datefmt": DATE_FORMAT,
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "formatter": "default",
            },
        },
        "loggers": {
            "uvicorn": {"handlers": ["default"], "level": level, "propagate": False},
            "uvicorn.error": {"handlers": ["default"], "level": level, "propagate": False},
            # 访问日志由 logging_middleware 输出，这里只保留告警
            "uvicorn.access": {"handlers": ["default"], "level": "WARNING", "propagate": False},
        },
    }


# 默认 logger 实例
logger = get_logger()
