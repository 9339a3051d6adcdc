"""Admin REST API: every endpoint requires the owner principal."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.pl_admin.application.schemas import (
    CreatePoolRequest,
    CreditCustodyRequest,
    SetOracleRateRequest,
    UpdatePoolParametersRequest,
    WithdrawReserveRequest,
)
from src.pl_admin.application.service import AdminService
from src.pl_common.response import ApiResponse, success_response
from src.pl_gateway.auth.dependencies import require_owner
from src.pl_lending.application.wiring import get_engine
from src.pl_lending.engine.engine import LendingEngine

router = APIRouter(prefix="/admin", tags=["admin"])


def get_admin_service(
    engine: Annotated[LendingEngine, Depends(get_engine)],
) -> AdminService:
    return AdminService(engine)


Admin = Annotated[AdminService, Depends(get_admin_service)]
Owner = Annotated[str, Depends(require_owner)]


@router.post("/pools")
async def create_pool(
    body: CreatePoolRequest, owner: Owner, service: Admin, request: Request
) -> ApiResponse:
    return success_response(service.create_pool(body).model_dump(), request)


@router.patch("/pools/{pool_id}")
async def update_pool_parameters(
    pool_id: str,
    body: UpdatePoolParametersRequest,
    owner: Owner,
    service: Admin,
    request: Request,
) -> ApiResponse:
    data = service.update_pool_parameters(pool_id, body)
    return success_response(data.model_dump(), request)


@router.post("/pools/{pool_id}/reserve/withdraw")
async def withdraw_reserve(
    pool_id: str,
    body: WithdrawReserveRequest,
    owner: Owner,
    service: Admin,
    request: Request,
) -> ApiResponse:
    return success_response(service.withdraw_reserve(pool_id, owner, body.amount), request)


@router.post("/custody/credit")
async def credit_custody(
    body: CreditCustodyRequest, owner: Owner, service: Admin, request: Request
) -> ApiResponse:
    return success_response(service.credit_custody(body), request)


@router.post("/oracle/rate")
async def set_oracle_rate(
    body: SetOracleRateRequest, owner: Owner, service: Admin, request: Request
) -> ApiResponse:
    """Refresh the manual price feed; restarts the staleness window."""
    return success_response(service.set_oracle_rate(body.rate), request)
