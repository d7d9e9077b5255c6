"""
测试公共夹具：临时站点目录 + 访问日志收集
"""
import logging

import pytest
from fastapi.testclient import TestClient

from arena.core.config import Settings
from arena.core.middleware import access_logger
from main import create_app

INDEX_HTML = "<!DOCTYPE html>\n<html><body><h1>Hello</h1></body></html>\n"
LOGO_BYTES = b"\x89PNG\r\n\x1a"


class RecordCollector(logging.Handler):
    """把日志记录收集到列表里"""
    def __init__(self):
        super().__init__(logging.DEBUG)
        self.records = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    @property
    def messages(self):
        return [record.getMessage() for record in self.records]


@pytest.fixture
def access_records():
    collector = RecordCollector()
    access_logger.addHandler(collector)
    try:
        yield collector
    finally:
        access_logger.removeHandler(collector)


@pytest.fixture
def site_dir(tmp_path):
    (tmp_path / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    assets = tmp_path / "assets"
    (assets / "x").mkdir(parents=True)
    (assets / "logo.png").write_bytes(LOGO_BYTES)
    (assets / "x" / "y.png").write_bytes(b"nested")
    (tmp_path / "secret.txt").write_text("top secret", encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(site_dir):
    return Settings(
        template=str(site_dir / "index.html"),
        assets_dir=str(site_dir / "assets"),
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c
