from __future__ import annotations

from typing import BinaryIO, Optional

from .constants import PACKAGE_MAGIC
from .errors import InvalidSignatureError


def looks_like_package(head: bytes) -> bool:
    return head[: len(PACKAGE_MAGIC)] == PACKAGE_MAGIC


def check_signature(f: BinaryIO, name: Optional[str] = None) -> bytes:
    """Read the first four bytes of f and confirm they are the package magic.

    The stream is left positioned after the signature; callers that need the
    whole input seek back to 0 themselves. Returns the signature bytes.

    Raises:
        InvalidSignatureError: fewer than four bytes, or the wrong four bytes.
    """
    head = f.read(len(PACKAGE_MAGIC))
    if not looks_like_package(head):
        raise InvalidSignatureError(head, name)
    return head
