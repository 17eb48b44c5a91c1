"""Tests for read-only static file serving."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from sample_app.api.application import create_api_application
from sample_app.domain import AppIdentity


def _build_client(static_directory: Path) -> TestClient:
    identity = AppIdentity(name="sample-app", version="1.0.0", start_time=datetime.now(timezone.utc))
    return TestClient(create_api_application(identity=identity, static_directory=static_directory))


def test_api_static_returns_exact_file_bytes(tmp_path: Path) -> None:
    """Serve an existing file with its exact content and HTTP 200.

    Returns:
        None: Assertions validate file serving.

    Raises:
        AssertionError: Raised when content differs.
    """

    file_content = b"\x89PNG\r\n\x1a\nbinary\x00payload"
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "logo.png").write_bytes(file_content)
    client = _build_client(tmp_path)

    response = client.get("/static/assets/logo.png")

    assert response.status_code == 200
    assert response.content == file_content


def test_api_static_returns_not_found_for_missing_file(tmp_path: Path) -> None:
    """Return HTTP 404 for a file absent from the static root.

    Returns:
        None: Assertions validate missing-file handling.

    Raises:
        AssertionError: Raised when a missing file is served.
    """

    client = _build_client(tmp_path)

    assert client.get("/static/missing.css").status_code == 404


def test_api_static_does_not_escape_static_root(tmp_path: Path) -> None:
    """Refuse to serve files outside the static root.

    Returns:
        None: Assertions validate path containment.

    Raises:
        AssertionError: Raised when a parent file is served.
    """

    static_root = tmp_path / "static"
    static_root.mkdir()
    (tmp_path / "secret.txt").write_text("secret", encoding="utf-8")
    client = _build_client(static_root)

    response = client.get("/static/..%2Fsecret.txt")

    assert response.status_code == 404


def test_api_static_rejects_writes(tmp_path: Path) -> None:
    """Reject upload attempts to the static mount.

    Returns:
        None: Assertions validate read-only behavior.

    Raises:
        AssertionError: Raised when a write is accepted.
    """

    client = _build_client(tmp_path)

    response = client.put("/static/upload.txt", content=b"data")

    assert response.status_code == 405
    assert not (tmp_path / "upload.txt").exists()


def test_api_static_missing_directory_logs_warning_and_returns_not_found(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Start without a static directory and answer 404 for static paths.

    Returns:
        None: Assertions validate degraded static handling.

    Raises:
        AssertionError: Raised when startup fails or files are served.
    """

    with caplog.at_level(logging.WARNING, logger="sample_app.api.application"):
        client = _build_client(tmp_path / "absent")

    assert "Static directory" in caplog.text
    assert client.get("/static/style.css").status_code == 404
