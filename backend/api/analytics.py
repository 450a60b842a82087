import logging

from fastapi import APIRouter, Depends, HTTPException

from auth import require_permission
from dependencies import get_db
from permissions import VIEW_ANALYTICS
from schemas import AnalyticsResponse
from services import analytics_service

logger = logging.getLogger("storefront")

router = APIRouter(tags=["analytics"])


@router.get(
    "/analytics",
    response_model=AnalyticsResponse,
    dependencies=[Depends(require_permission(VIEW_ANALYTICS))],
)
async def read_analytics(db=Depends(get_db)) -> AnalyticsResponse:
    try:
        return await analytics_service.build_analytics(db)
    except Exception as exc:
        logger.exception("analytics failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
