"""Map a request path to the object keys worth trying."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass


INDEX_DOCUMENT = "index.html"

_SEPARATOR = "/"


@dataclass(frozen=True)
class CandidateKeys:
    """Keys to fetch for one request, in order.

    Attributes:
        primary: Key derived directly from the path.
        secondary: Index document beneath ``primary``; only used as a fallback.
    """

    primary: str
    secondary: str


def resolve(path: str) -> CandidateKeys:
    """Compute the candidate keys for ``path``.

    Exactly one leading separator is dropped. The rest of the path is used as-is,
    so ``..`` segments and percent-escapes reach S3 untouched.

    >>> resolve("/docs/")
    CandidateKeys(primary='docs/', secondary='docs/index.html')
    >>> resolve("/")
    CandidateKeys(primary='', secondary='index.html')
    """
    primary = path[1:] if path.startswith(_SEPARATOR) else path
    return CandidateKeys(primary=primary, secondary=posixpath.join(primary, INDEX_DOCUMENT))
