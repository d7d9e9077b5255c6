"""
首页：模板在启动时解析并渲染一次，请求时直接返回缓存结果
"""
import os
from http import HTTPStatus
from typing import Optional

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape
from starlette.requests import Request
from starlette.responses import HTMLResponse, PlainTextResponse, Response

from arena.core.logger import get_logger

logger = get_logger("pages")


class LandingPage:
    """首页模板 (只读共享)"""

    def __init__(self, path: str):
        self.path = path
        self._html: Optional[str] = None

    def load(self) -> str:
        """解析并渲染模板，失败时抛出 TemplateError"""
        directory, filename = os.path.split(os.path.abspath(self.path))
        env = Environment(
            loader=FileSystemLoader(directory),
            autoescape=select_autoescape(["html", "htm", "xml"]),
        )
        template = env.get_template(filename)
        self._html = template.render()
        logger.info(f"首页模板加载完成: {self.path} ({len(self._html)} 字符)")
        return self._html

    @property
    def html(self) -> str:
        if self._html is None:
            raise TemplateError(f"模板未加载: {self.path}")
        return self._html


def internal_error() -> Response:
    return PlainTextResponse(HTTPStatus.INTERNAL_SERVER_ERROR.phrase, status_code=HTTPStatus.INTERNAL_SERVER_ERROR)


def make_index(page: LandingPage):
    """生成首页处理函数"""
    async def index(request: Request) -> Response:
        try:
            return HTMLResponse(page.html)
        except TemplateError as e:
            logger.error(f"首页渲染失败: {e}")
            return internal_error()
    return index
