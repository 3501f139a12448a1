"""
Decide whether the primary fetch is final or the index document must be tried.

The secondary key is fetched at most once, and only after the primary fetch
has finished: when the primary key is missing, or when it is a directory
placeholder object.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from .errors import EffError
from .policy import is_missing
from .resolver import CandidateKeys
from .result import Failure, Result, Success
from .storage import FetchedObject


_logger = logging.getLogger(__name__)

DIRECTORY_CONTENT_TYPE = "application/x-directory"

FetchResult = Result[FetchedObject, EffError]
Fetch = Callable[[str], Awaitable[FetchResult]]


def needs_fallback(result: FetchResult) -> bool:
    """True when ``result`` should be replaced by a fetch of the secondary key."""
    match result:
        case Success(FetchedObject(content_type=content_type)):
            return content_type == DIRECTORY_CONTENT_TYPE
        case Failure(error):
            return is_missing(error)


async def fetch_with_fallback(fetch: Fetch, keys: CandidateKeys) -> FetchResult:
    """Fetch the primary key, falling back once to the secondary key.

    Args:
        fetch: Coroutine fetching a single key
        keys: Candidate keys for the request

    Returns:
        The primary result, or the secondary result unchanged when a fallback applies
    """
    primary = await fetch(keys.primary)
    if not needs_fallback(primary):
        return primary

    _logger.debug("Falling back from %r to %r", keys.primary, keys.secondary)
    return await fetch(keys.secondary)
