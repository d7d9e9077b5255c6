"""
服务配置：从环境变量 (.env) 读取，缺省值即固定部署参数
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """运行参数 (不可变)"""
    host: str = "0.0.0.0"
    port: int = 8080
    template: str = "index.html"
    assets_dir: str = "assets"
    log_dir: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """从环境变量构建配置"""
        raw_port = os.getenv("ARENA_PORT", str(cls.port))
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"ARENA_PORT 不是合法端口: {raw_port!r}")

        return cls(
            host=os.getenv("ARENA_HOST", cls.host),
            port=port,
            template=os.getenv("ARENA_TEMPLATE", cls.template),
            assets_dir=os.getenv("ARENA_ASSETS_DIR", cls.assets_dir),
            log_dir=os.getenv("ARENA_LOG_DIR") or None,
            log_level=os.getenv("ARENA_LOG_LEVEL", cls.log_level).upper(),
        )


settings = Settings.from_env()
