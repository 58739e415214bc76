"""
Pytest fixtures for BankReview tests.
"""

from __future__ import annotations

import pytest


@pytest.fixture
def client():
    """FastAPI TestClient for the analyzer app."""
    from fastapi.testclient import TestClient

    from api.main import app

    return TestClient(app)


@pytest.fixture
def upload():
    """Build a multipart "files" entry from text."""

    def _upload(name: str, text: str, content_type: str = "text/plain"):
        return (name, text.encode("utf-8"), content_type)

    return _upload
