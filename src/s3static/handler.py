"""
Request pipeline: path in, exactly one response out.

Stages run left to right and pass ``Result`` values between them:

    resolve -> fetch primary -> [fetch secondary] -> map response
            -> translate missing -> log error -> terminal response

``StaticSiteHandler.handle`` never raises for a well-formed request. Every
failure ends up as the 404 or the 500 response.
"""

from __future__ import annotations

import logging
from typing import Mapping

from pydantic import BaseModel, ConfigDict, ValidationError

from .config import HandlerSettings
from .diagnostics import DiagnosticSink, LoggingSink
from .errors import EffError, InvocationError
from .fallback import FetchResult, fetch_with_fallback
from .policy import apply_error_policy
from .resolver import resolve
from .responses import Response, object_to_response
from .result import Failure, Result, Success
from .storage import ObjectFetcher


_logger = logging.getLogger(__name__)


class ProxyRequest(BaseModel):
    """The part of a proxy-integration event the handler reads."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    path: str


class StaticSiteHandler:
    """Serve objects from one bucket with static-file-server semantics.

    The handler keeps no per-request state, so one instance may serve any
    number of sequential or concurrent invocations.

    Usage:
        handler = StaticSiteHandler(S3Operations(client), HandlerSettings.from_env())
        response = await handler.handle(ProxyRequest(path="/docs/"))
    """

    def __init__(
        self,
        gateway: ObjectFetcher,
        settings: HandlerSettings,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self._gateway = gateway
        self._settings = settings
        self._sink: DiagnosticSink = sink if sink is not None else LoggingSink()

    async def handle(self, request: ProxyRequest) -> Response:
        """Resolve ``request`` to a single response."""
        keys = resolve(request.path)
        _logger.debug("Resolved %r to %r", request.path, keys)

        fetched = await fetch_with_fallback(self._fetch, keys)

        mapped: Result[Response, EffError]
        match fetched:
            case Success(obj):
                match object_to_response(obj):
                    case Success(response):
                        mapped = Success(response)
                    case Failure(error):
                        mapped = Failure(error)
            case Failure(error):
                mapped = Failure(error)

        return apply_error_policy(mapped, self._sink)

    async def handle_event(self, event: Mapping[str, object]) -> Response:
        """Validate a raw event and handle it; a malformed event becomes the 500 response."""
        try:
            request = ProxyRequest.model_validate(dict(event))
        except ValidationError as exc:
            invalid: Result[Response, EffError] = Failure(
                InvocationError(message=f"Invalid request event: {exc.error_count()} error(s)")
            )
            return apply_error_policy(invalid, self._sink)
        return await self.handle(request)

    async def _fetch(self, key: str) -> FetchResult:
        match self._settings.require_bucket():
            case Success(bucket):
                match await self._gateway.get_object(bucket, key):
                    case Success(obj):
                        return Success(obj)
                    case Failure(storage_error):
                        return Failure(storage_error)
            case Failure(config_error):
                return Failure(config_error)
