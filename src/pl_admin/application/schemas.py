"""Pydantic schemas for the owner-only admin API."""

from pydantic import BaseModel, Field

from src.pl_common.amounts import MAX_RATE
from src.pl_common.enums import AssetKind, Orientation


class CreatePoolRequest(BaseModel):
    pool_id: str = Field(..., min_length=1, max_length=64)
    orientation: Orientation
    interest_rate: int = Field(..., ge=0, le=MAX_RATE, description="Percent per year")
    collateral_factor: int = Field(..., ge=0, le=MAX_RATE, description="Percent")
    reserve_fee_rate: int = Field(..., ge=0, le=MAX_RATE, description="Percent")


class UpdatePoolParametersRequest(BaseModel):
    interest_rate: int | None = Field(None, ge=0, le=MAX_RATE)
    collateral_factor: int | None = Field(None, ge=0, le=MAX_RATE)
    reserve_fee_rate: int | None = Field(None, ge=0, le=MAX_RATE)


class WithdrawReserveRequest(BaseModel):
    amount: int = Field(..., ge=0)


class CreditCustodyRequest(BaseModel):
    asset: AssetKind
    principal: str = Field(..., min_length=1)
    amount: int = Field(..., gt=0)


class SetOracleRateRequest(BaseModel):
    rate: int = Field(..., gt=0, description="Asset-B per asset-A, scaled by PRICE_DECIMALS")
