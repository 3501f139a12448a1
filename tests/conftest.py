# tests/conftest.py
"""Global PyTest fixtures for the test-suite.

Nothing here touches the network: the S3 client, the aioboto3 session and
the diagnostic sink are all in-memory doubles from ``tests.helpers``.
"""

from __future__ import annotations

import logging
from typing import Generator

import pytest

from s3static.config import HandlerSettings
from s3static.handler import StaticSiteHandler
from s3static.storage import S3Operations
from tests.helpers import FakeS3Client, RecordingSink

TEST_BUCKET = "test-site"


@pytest.fixture
def s3_client() -> FakeS3Client:
    """Empty in-memory bucket; unknown keys raise AccessDenied."""
    return FakeS3Client()


@pytest.fixture
def s3_ops(s3_client: FakeS3Client) -> S3Operations:
    """Gateway wired to the in-memory client."""
    return S3Operations(s3_client)


@pytest.fixture
def settings() -> HandlerSettings:
    """Settings pointing at TEST_BUCKET."""
    return HandlerSettings(bucket=TEST_BUCKET)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def site_handler(
    s3_ops: S3Operations, settings: HandlerSettings, sink: RecordingSink
) -> StaticSiteHandler:
    """Handler over the in-memory bucket with a recording sink."""
    return StaticSiteHandler(s3_ops, settings, sink)


@pytest.fixture(autouse=True)
def restore_package_log_level() -> Generator[None, None, None]:
    """Undo configure_logging() calls made by a test."""
    logger = logging.getLogger("s3static")
    previous = logger.level
    yield
    logger.setLevel(previous)
