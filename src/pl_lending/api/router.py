"""pl_lending REST API: operations act on behalf of the authenticated principal."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.pl_common.response import ApiResponse, success_response
from src.pl_gateway.auth.dependencies import get_current_principal
from src.pl_lending.application.schemas import (
    BorrowRequest,
    DepositRequest,
    LiquidateRequest,
    RepayRequest,
)
from src.pl_lending.application.service import LendingApplicationService
from src.pl_lending.application.wiring import get_engine
from src.pl_lending.engine.engine import LendingEngine

router = APIRouter(prefix="/pools", tags=["pools"])


def get_service(
    engine: Annotated[LendingEngine, Depends(get_engine)],
) -> LendingApplicationService:
    return LendingApplicationService(engine)


Service = Annotated[LendingApplicationService, Depends(get_service)]
Principal = Annotated[str, Depends(get_current_principal)]


@router.get("")
async def list_pools(service: Service, request: Request) -> ApiResponse:
    return success_response([p.model_dump() for p in service.list_pools()], request)


@router.get("/{pool_id}")
async def get_pool(pool_id: str, service: Service, request: Request) -> ApiResponse:
    return success_response(service.get_pool(pool_id).model_dump(), request)


@router.post("/{pool_id}/deposit")
async def deposit(
    pool_id: str,
    body: DepositRequest,
    principal: Principal,
    service: Service,
    request: Request,
) -> ApiResponse:
    data = service.deposit(pool_id, principal, body.amount)
    return success_response(data.model_dump(), request)


@router.post("/{pool_id}/withdraw")
async def withdraw(
    pool_id: str, principal: Principal, service: Service, request: Request
) -> ApiResponse:
    data = service.withdraw(pool_id, principal)
    return success_response(data.model_dump(), request)


@router.post("/{pool_id}/borrow")
async def borrow(
    pool_id: str,
    body: BorrowRequest,
    principal: Principal,
    service: Service,
    request: Request,
) -> ApiResponse:
    data = service.borrow(pool_id, principal, body.collateral_amount, body.duration)
    return success_response(data.model_dump(), request)


@router.post("/{pool_id}/repay")
async def repay(
    pool_id: str,
    body: RepayRequest,
    principal: Principal,
    service: Service,
    request: Request,
) -> ApiResponse:
    data = service.repay(pool_id, principal, body.amount)
    return success_response(data.model_dump(), request)


@router.post("/{pool_id}/liquidate")
async def liquidate(
    pool_id: str,
    body: LiquidateRequest,
    principal: Principal,
    service: Service,
    request: Request,
) -> ApiResponse:
    data = service.liquidate(pool_id, principal, body.borrower)
    return success_response(data.model_dump(), request)


@router.get("/{pool_id}/borrow-quote")
async def borrow_quote(
    pool_id: str,
    service: Service,
    request: Request,
    collateral_amount: int = Query(..., gt=0),
    duration: int = Query(..., gt=0, description="Seconds"),
) -> ApiResponse:
    data = service.get_borrow_quote(pool_id, collateral_amount, duration)
    return success_response(data.model_dump(), request)


@router.get("/{pool_id}/loans/{principal}")
async def get_loan(
    pool_id: str, principal: str, service: Service, request: Request
) -> ApiResponse:
    return success_response(service.get_loan(pool_id, principal).model_dump(), request)


@router.get("/{pool_id}/loans/{principal}/payoff-quote")
async def payoff_quote(
    pool_id: str, principal: str, service: Service, request: Request
) -> ApiResponse:
    return success_response(service.get_payoff_quote(pool_id, principal).model_dump(), request)


@router.get("/{pool_id}/depositors/{principal}")
async def get_depositor(
    pool_id: str, principal: str, service: Service, request: Request
) -> ApiResponse:
    return success_response(service.get_depositor(pool_id, principal).model_dump(), request)


@router.get("/{pool_id}/loans")
async def list_loans(pool_id: str, service: Service, request: Request) -> ApiResponse:
    return success_response([loan.model_dump() for loan in service.list_loans(pool_id)], request)


@router.get("/{pool_id}/depositors")
async def list_depositors(pool_id: str, service: Service, request: Request) -> ApiResponse:
    return success_response([d.model_dump() for d in service.list_depositors(pool_id)], request)
