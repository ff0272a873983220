from typing import Optional

from gfshares.common.constants import MIN_SHARE_LENGTH


class ShareError(ValueError):
    """Base class for share encoding errors."""


class InvalidShareLength(ShareError):
    def __init__(self, length: int, index: Optional[int] = None):
        self.length = length
        self.index = index
        where = "" if index is None else f" at index {index}"
        super().__init__(
            f"Share{where} must contain at least {MIN_SHARE_LENGTH} byte, got {length}"
        )
