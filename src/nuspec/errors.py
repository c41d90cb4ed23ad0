"""Error type raised for structurally invalid manifests."""

from typing import Optional

from constants import LogCode


class PackagingException(Exception):
    """Raised when a manifest entry cannot be interpreted.

    Attributes:
        message: Human readable description.
        log_code: Stable diagnostic code (e.g. NU5032) when one applies.
    """

    def __init__(self, message: str, log_code: Optional[LogCode] = None):
        super().__init__(message)
        self.message = message
        self.log_code = log_code

    def __str__(self) -> str:
        if self.log_code is not None:
            return f"{self.log_code.value}: {self.message}"
        return self.message
