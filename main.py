from contextlib import asynccontextmanager

from fastapi import FastAPI

from arena.api.assets import build_assets
from arena.api.pages import LandingPage, make_index
from arena.core.config import Settings, settings as default_settings
from arena.core.logger import logger, uvicorn_log_config
from arena.core.middleware import chain, logging_middleware, method, tracing


def create_app(settings: Settings = None) -> FastAPI:
    """创建应用: /assets 静态资源 + 其余路径全部走首页"""
    settings = settings or default_settings
    page = LandingPage(settings.template)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """服务启动和关闭时的生命周期管理"""
        logger.info("服务启动中..")
        try:
            page.load()
        except Exception as e:
            logger.error(f"首页模板加载失败: {e}")
            raise
        print(f"Connected to port {settings.port}, Have a nice day!", flush=True)

        yield

        logger.info("服务关闭中...")

    app = FastAPI(
        title="E-sports Competition Site",
        description="竞赛落地页 + 静态资源",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.page = page

    # 中间件在注册时组合一次
    mw = chain(logging_middleware(), method("GET"), tracing())

    # 挂载顺序决定匹配顺序：/assets 优先
    app.mount("/assets", build_assets(settings.assets_dir), name="assets")
    # methods=None: 所有方法都进入处理链，由 method 中间件返回 400
    app.add_route("/{path:path}", mw(make_index(page)), methods=None, include_in_schema=False)
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:create_app",
        factory=True,
        host=default_settings.host,
        port=default_settings.port,
        log_config=uvicorn_log_config(),
        # 访问日志由 logging_middleware 输出
        access_log=False,
    )
