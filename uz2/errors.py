from typing import Optional


class Uz2Error(Exception):
    """Base class for uz2-specific errors."""


class InvalidSignatureError(Uz2Error):
    """Input does not start with the Unreal package signature."""

    def __init__(self, head: bytes, name: Optional[str] = None):
        self.head = head
        self.name = name
        super().__init__(f"{name or 'input'} doesn't look like an Unreal package")


# Record bounds/consistency
class RecordBoundsError(Uz2Error):
    pass


class TruncatedRecordError(Uz2Error):
    pass
