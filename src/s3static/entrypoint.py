"""
AWS Lambda entry point.

Settings and the aioboto3 session are created once per process; each event
opens its own S3 client, runs the pipeline once and closes the client.
"""

from __future__ import annotations

import asyncio
from typing import Mapping

import aioboto3
from botocore.config import Config

from .config import HandlerSettings
from .diagnostics import configure_logging
from .handler import StaticSiteHandler
from .storage import S3Operations, SessionProtocol


_SETTINGS = HandlerSettings.from_env()
configure_logging(_SETTINGS.log_level)

_SESSION: SessionProtocol = aioboto3.Session(region_name=_SETTINGS.region_name)


def boto_config(settings: HandlerSettings) -> Config:
    """botocore client config carrying the timeouts and retry budget."""
    return Config(
        connect_timeout=settings.connect_timeout,
        read_timeout=settings.read_timeout,
        retries={"max_attempts": settings.max_attempts, "mode": "standard"},
    )


async def serve(
    event: Mapping[str, object], settings: HandlerSettings, session: SessionProtocol
) -> dict[str, object]:
    """Handle one event with a fresh S3 client and return the wire response."""
    async with session.client(
        "s3", endpoint_url=settings.endpoint_url, config=boto_config(settings)
    ) as client:
        handler = StaticSiteHandler(S3Operations(client), settings)
        response = await handler.handle_event(event)
    return response.to_dict()


def lambda_handler(event: Mapping[str, object], context: object) -> dict[str, object]:
    """Lambda runtime entry point."""
    return asyncio.run(serve(event, _SETTINGS, _SESSION))
