from collections.abc import Generator
from functools import partial
import gzip
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
import threading

import pytest

from jsonlcheck.config import Settings
from jsonlcheck.pipeline import ValidationRunner

from helpers import VALID_ROWS, jsonl_text


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(input_url="", file_type="", log_level="INFO", http_timeout_seconds=5)


@pytest.fixture()
def runner(test_settings: Settings) -> ValidationRunner:
    return ValidationRunner(test_settings)


@pytest.fixture()
def jsonl_file(tmp_path: Path) -> Path:
    path = tmp_path / "records.jsonl"
    path.write_text(jsonl_text(VALID_ROWS), encoding="utf-8")
    return path


@pytest.fixture()
def gz_file(tmp_path: Path) -> Path:
    path = tmp_path / "records.jsonl.gz"
    with gzip.open(path, "wt", encoding="utf-8") as outfile:
        outfile.write(jsonl_text(VALID_ROWS))
    return path


class QuietHandler(SimpleHTTPRequestHandler):
    def log_message(self, format: str, *args: object) -> None:
        pass


@pytest.fixture()
def http_server(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[tuple[Path, str], None, None]:
    """Serve a temporary directory over real HTTP on 127.0.0.1."""
    root = tmp_path / "served"
    root.mkdir()
    monkeypatch.setenv("NO_PROXY", "127.0.0.1")
    monkeypatch.setenv("no_proxy", "127.0.0.1")

    server = ThreadingHTTPServer(("127.0.0.1", 0), partial(QuietHandler, directory=str(root)))
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield root, f"http://127.0.0.1:{server.server_port}"
    finally:
        server.shutdown()
        server.server_close()
        thread.join()
