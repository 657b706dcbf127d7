from __future__ import annotations

from fastapi import APIRouter, Depends

from .. import metrics
from ..deps import get_catalog, get_gateway, get_store, unwrap_report
from ..gateway import CoachingGateway
from ..lessons import LessonCatalog
from ..reports import GrowthTrendReport
from ..roster import StudentStore

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("")
async def overview(
	store: StudentStore = Depends(get_store),
	catalog: LessonCatalog = Depends(get_catalog),
):
	return {
		"roster": metrics.roster_summary(store.list()),
		"lesson_plans": len(catalog),
	}


@router.post("/growth-trend", response_model=GrowthTrendReport)
async def growth_trend(
	store: StudentStore = Depends(get_store),
	catalog: LessonCatalog = Depends(get_catalog),
	gateway: CoachingGateway = Depends(get_gateway),
):
	result = await gateway.generate_growth_trend(catalog.list(), store.list())
	return unwrap_report(result)
