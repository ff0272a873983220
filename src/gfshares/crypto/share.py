import logging
from typing import Iterable, Union

from pydantic import BaseModel, ConfigDict

from gfshares.common.constants import MIN_SHARE_LENGTH, X_OFFSET, Y_OFFSET
from gfshares.common.errors import InvalidShareLength
from gfshares.crypto.field import GF256

logger = logging.getLogger(__name__)

ByteSequence = Union[bytes, bytearray, memoryview, Iterable[int]]


class Share(BaseModel):
    """
    One evaluation point ``(x, y)`` of a secret sharing polynomial.

    ``y`` holds one element per byte of the secret, in the secret's byte order.
    The dealer is responsible for a non-zero ``x``, and for equal ``y`` lengths
    and distinct ``x`` values across the shares of one session.
    """

    model_config = ConfigDict(frozen=True)

    x: GF256
    y: tuple[GF256, ...]

    def __bytes__(self) -> bytes:
        return encode(self)

    def to_bytes(self) -> bytes:
        return encode(self)

    @classmethod
    def from_bytes(cls, data: ByteSequence) -> "Share":
        return decode(data)


def encode(share: Share) -> bytes:
    """
    Serializes a share as ``x`` followed by every ``y`` element.

    Args:
        share (Share): The share to serialize. ``y`` may be empty.

    Returns:
        bytes: ``len(share.y) + 1`` bytes, ``x`` at offset 0 and ``y`` in order after it.
    """
    return bytes([share.x.value, *(element.value for element in share.y)])


def decode(data: ByteSequence) -> Share:
    """
    Parses a share from the layout produced by :func:`encode`.

    Args:
        data (ByteSequence): The serialized share. Any bytes-like object or iterable of
            ints in ``[0, 255]`` is accepted.

    Returns:
        Share: ``x`` from the first byte and ``y`` from the remaining bytes.
            A single byte gives an empty ``y``.

    Raises:
        InvalidShareLength: If ``data`` is empty.
        TypeError: If ``data`` is an int, which ``bytes()`` would turn into zero padding.
    """
    if isinstance(data, int):
        raise TypeError(f"Expected a byte sequence, got {type(data).__name__}")
    raw = bytes(data)
    if len(raw) < MIN_SHARE_LENGTH:
        logger.debug(f"Rejected share of length {len(raw)}")
        raise InvalidShareLength(len(raw))
    return Share(
        x=GF256(raw[X_OFFSET]),
        y=tuple(GF256(b) for b in raw[Y_OFFSET:]),
    )
