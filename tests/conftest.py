"""
Pytest configuration and fixtures
"""
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

from literature_reader import Settings, create_app

COMPILE_URL = "https://compile.test/compile"


@pytest.fixture
def literature_dir(tmp_path: Path) -> Path:
    path = tmp_path / "literature"
    path.mkdir()
    return path


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    path = tmp_path / "static"
    path.mkdir()
    (path / "index.html").write_text("<h1>Library</h1>", encoding="utf-8")
    return path


@pytest.fixture
def settings(literature_dir: Path, static_dir: Path) -> Settings:
    return Settings(
        literature_dir=str(literature_dir),
        static_dir=str(static_dir),
        compile_url=COMPILE_URL,
    )


@pytest.fixture
def compile_calls():
    """Requests received by the fake compile service"""
    return []


@pytest.fixture
def compile_handler():
    """Default fake compile service reply, override in a test module"""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"Errors": "", "Events": [{"Message": "hello\n", "Kind": "stdout"}]},
        )
    return handler


@pytest.fixture
def client(settings, compile_calls, compile_handler):
    def record(request: httpx.Request) -> httpx.Response:
        compile_calls.append(request)
        return compile_handler(request)

    app = create_app(settings, transport=httpx.MockTransport(record))
    with TestClient(app) as test_client:
        yield test_client
