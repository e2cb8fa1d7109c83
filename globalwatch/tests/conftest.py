"""Shared fixtures"""

import os

# Settings are read once at import time.
os.environ.setdefault("LOG_DIR", "")
os.environ.setdefault("PAGE_DELAY_SECONDS", "0")

from typing import Any, Dict  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402

from globalwatch.tests.factories import fbi_item, fbi_page, json_transport  # noqa: E402


@pytest.fixture
def bank_robber() -> Dict[str, Any]:
    return fbi_item("robber1", title="ROBERT EXAMPLE")


@pytest.fixture
def fbi_pages() -> Dict[int, Dict[str, Any]]:
    """Two-record pages of FBI records, five records in total."""
    return {
        1: fbi_page([fbi_item("a1"), fbi_item("a2")], total=5, page=1),
        2: fbi_page([fbi_item("b1"), fbi_item("b2")], total=5, page=2),
        3: fbi_page([fbi_item("c1")], total=5, page=3),
    }


@pytest.fixture
def fbi_transport(fbi_pages) -> httpx.MockTransport:
    def handler(request: httpx.Request):
        page = int(request.url.params.get("page", "1"))
        return fbi_pages.get(page, fbi_page([], total=5, page=page))

    return json_transport(handler)
