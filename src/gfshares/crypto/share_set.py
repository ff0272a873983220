import logging
from typing import Iterable

from gfshares.common.errors import InvalidShareLength
from gfshares.crypto.share import ByteSequence, Share, decode, encode

logger = logging.getLogger(__name__)


def encode_all(shares: Iterable[Share]) -> list[bytes]:
    """
    Serializes every share, in order.

    Args:
        shares (Iterable[Share]): Shares to serialize. A lazy dealer generator works,
            as long as it is finite.

    Returns:
        list[bytes]: One encoded share per input share.
    """
    blobs = [encode(share) for share in shares]
    logger.debug(f"Encoded {len(blobs)} shares")
    return blobs


def decode_all(blobs: Iterable[ByteSequence]) -> list[Share]:
    """
    Parses every serialized share, in order.

    Args:
        blobs (Iterable[ByteSequence]): Serialized shares, as produced by :func:`encode_all`.

    Returns:
        list[Share]: The decoded shares.

    Raises:
        InvalidShareLength: If a blob is empty. ``index`` points at the offending blob.
    """
    shares = []
    for index, blob in enumerate(blobs):
        try:
            shares.append(decode(blob))
        except InvalidShareLength as e:
            raise InvalidShareLength(e.length, index=index) from e
    logger.debug(f"Decoded {len(shares)} shares")
    return shares
