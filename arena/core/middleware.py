"""
请求处理中间件

Handler    : async (Request) -> Response，终端处理函数
Middleware : Handler -> Handler，在处理函数外层包裹横切逻辑

chain(m1, m2, m3)(h) 等价于 m1(m2(m3(h)))：第一个参数是最外层，
前置逻辑最先执行、后置逻辑最后执行。组合在注册路由时完成一次。
"""
import functools
import time
from http import HTTPStatus
from typing import Awaitable, Callable

from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from arena.core.logger import get_logger

Handler = Callable[[Request], Awaitable[Response]]
Middleware = Callable[[Handler], Handler]

access_logger = get_logger("access")


def format_duration(seconds: float) -> str:
    """耗时格式化: 850ns / 532.1µs / 1.204ms / 2.5s"""
    if seconds < 1e-6:
        return f"{round(seconds * 1e9)}ns"
    if seconds < 1e-3:
        value, unit = seconds * 1e6, "µs"
    elif seconds < 1:
        value, unit = seconds * 1e3, "ms"
    else:
        value, unit = seconds, "s"
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return f"{text}{unit}"


def request_uri(request: Request) -> str:
    """原始请求目标 (未解码): raw_path + ?query"""
    raw_path = request.scope.get("raw_path")
    uri = raw_path.decode("latin-1") if raw_path else request.url.path
    query = request.scope.get("query_string", b"")
    if query:
        uri += "?" + query.decode("latin-1")
    return uri


def logging_middleware() -> Middleware:
    """记录每次请求的路径和耗时 (处理函数返回或抛错之后)"""
    def decorator(handler: Handler) -> Handler:
        @functools.wraps(handler)
        async def wrapped(request: Request) -> Response:
            start = time.perf_counter()
            try:
                return await handler(request)
            finally:
                access_logger.info("%s %s", request.url.path, format_duration(time.perf_counter() - start))
        return wrapped
    return decorator


def method(m: str) -> Middleware:
    """只放行指定 HTTP 方法，其余直接返回 400"""
    expected = m.upper()

    def decorator(handler: Handler) -> Handler:
        @functools.wraps(handler)
        async def wrapped(request: Request) -> Response:
            if request.method != expected:
                return PlainTextResponse(HTTPStatus.BAD_REQUEST.phrase, status_code=HTTPStatus.BAD_REQUEST)
            return await handler(request)
        return wrapped
    return decorator


def tracing() -> Middleware:
    """在 stdout 打印当前请求地址"""
    def decorator(handler: Handler) -> Handler:
        @functools.wraps(handler)
        async def wrapped(request: Request) -> Response:
            print(f"Tracing request for {request_uri(request)}", flush=True)
            return await handler(request)
        return wrapped
    return decorator


def chain(*middlewares: Middleware) -> Middleware:
    """把多个中间件组合成一个，第一个参数为最外层"""
    def decorator(handler: Handler) -> Handler:
        for middleware in reversed(middlewares):
            handler = middleware(handler)
        return handler
    return decorator
