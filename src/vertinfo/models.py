"""Value types served by the query methods."""

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt

__all__ = ["EconConf", "Multiplier"]

Multiplier = tuple[NonNegativeInt, PositiveInt]
"""A ratio stored as ``(numerator, denominator)``."""


class EconConf(BaseModel):
    """Economic configuration of a chain.

    All integers are Python ints, so values beyond 53 bits survive intact.
    Negative values are rejected; every field serializes to a plain ``0x``
    hex string. Serialized with the camelCase field names clients expect.

    Attributes:
        gas_limit_multiplier: Ratio applied to the gas limit
        gas_price_multiplier: Ratio applied to the gas price
        base_fee: Base fee in the chain's smallest unit
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    gas_limit_multiplier: Multiplier = Field(alias="gasLimitMultiplier")
    gas_price_multiplier: Multiplier = Field(alias="gasPriceMultiplier")
    base_fee: NonNegativeInt = Field(alias="baseFee")
