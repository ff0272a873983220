from pydantic import BaseModel, ConfigDict, Field, StrictInt

from gfshares.common.constants import FIELD_ORDER


class GF256(BaseModel):
    """
    An element of GF(2^8), stored as its raw byte.

    Only equality, hashing and raw-byte access are exposed. Field arithmetic
    lives with the dealer and recovery code, so ``GF256(1) + 1`` is a TypeError
    rather than silent integer math on share bytes.
    """

    model_config = ConfigDict(frozen=True)

    value: StrictInt = Field(ge=0, lt=FIELD_ORDER)

    def __init__(self, value: int, **data) -> None:
        super().__init__(value=value, **data)

    def __int__(self) -> int:
        return self.value

    def __bytes__(self) -> bytes:
        return bytes([self.value])
