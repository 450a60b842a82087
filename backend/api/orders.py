import logging

from fastapi import APIRouter, Depends, HTTPException

from dependencies import get_db, get_payments
from schemas import ProcessOrderRequest, ProcessOrderResponse
from services import orders_service

logger = logging.getLogger("storefront")

router = APIRouter(tags=["orders"])


@router.post("/process-order", response_model=ProcessOrderResponse)
async def process_order(
    payload: ProcessOrderRequest,
    db=Depends(get_db),
    payments=Depends(get_payments),
) -> ProcessOrderResponse:
    try:
        return await orders_service.process_order(db, payments, payload)
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("process_order failed user=%s: %s", payload.userId, exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
