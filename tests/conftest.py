import pytest

from gfshares.crypto.field import GF256
from gfshares.crypto.share import Share


@pytest.fixture
def share() -> Share:
    return Share(x=GF256(1), y=[GF256(2), GF256(3)])


@pytest.fixture
def shares() -> list[Share]:
    # three shares of a 4 byte secret, as a dealer would hand them out
    return [
        Share(x=GF256(x), y=[GF256((x * i + 7) % 256) for i in range(4)])
        for x in (1, 2, 3)
    ]
