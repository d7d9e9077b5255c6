import os

from starlette.staticfiles import StaticFiles

from arena.core.logger import get_logger

logger = get_logger("assets")


def build_assets(directory: str) -> StaticFiles:
    """静态资源目录，挂载后 URL 前缀自动去除；目录不存在时启动失败"""
    if not os.path.isdir(directory):
        logger.error(f"静态资源目录不存在: {os.path.abspath(directory)}")
        raise RuntimeError(f"静态资源目录不存在: {directory}")
    return StaticFiles(directory=directory)
