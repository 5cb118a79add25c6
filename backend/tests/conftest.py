"""
Pytest configuration and fixtures
"""
import importlib.util
import os
import sys
from html.parser import HTMLParser
from pathlib import Path

import pytest

# Add backend directory to path for imports
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

# Keep test runs from writing log files
os.environ.setdefault("LOG_FILE_ENABLED", "false")
os.environ.setdefault("LOG_FORMAT", "text")


def _load_main():
    main_path = backend_dir / "main.py"
    spec = importlib.util.spec_from_file_location("main", main_path)
    main_module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(main_module)
    return main_module


@pytest.fixture(scope="session")
def fastapi_app():
    """FastAPI application from backend/main.py"""
    return _load_main().app


@pytest.fixture(scope="function")
def client(fastapi_app):
    """Create test client"""
    from fastapi.testclient import TestClient

    with TestClient(fastapi_app) as test_client:
        yield test_client


class DocumentParser(HTMLParser):
    """Collects start tags and their attributes, in document order"""

    def __init__(self):
        super().__init__()
        self.tags = []
        self.title = ""
        self._in_title = False

    def handle_starttag(self, tag, attrs):
        self.tags.append((tag, dict(attrs)))
        if tag == "title":
            self._in_title = True

    def handle_endtag(self, tag):
        if tag == "title":
            self._in_title = False

    def handle_data(self, data):
        if self._in_title:
            self.title += data

    def find_all(self, tag):
        return [attrs for name, attrs in self.tags if name == tag]

    def meta(self, name):
        for attrs in self.find_all("meta"):
            if attrs.get("name") == name:
                return attrs.get("content")
        return None


@pytest.fixture
def parse_document():
    """Parse an HTML document into a DocumentParser"""
    def _parse(html: str) -> DocumentParser:
        parser = DocumentParser()
        parser.feed(html)
        parser.close()
        return parser
    return _parse
