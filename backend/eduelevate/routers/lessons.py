from __future__ import annotations
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from pydantic import BaseModel, Field

from ..deps import get_catalog, get_gateway, read_upload, unwrap_report
from ..gateway import CoachingGateway
from ..lessons import LessonCatalog
from ..models import LessonPlan
from ..reports import LessonCritique, StructuredLessonPlan

router = APIRouter(prefix="/lessons", tags=["lessons"])


class RewriteRequest(BaseModel):
	content: str = ""
	suggestions: List[str] = Field(default_factory=list)
	target_lesson: Optional[str] = None


@router.get("", response_model=List[LessonPlan])
async def list_lessons(catalog: LessonCatalog = Depends(get_catalog)):
	return catalog.list()


@router.get("/{plan_id}", response_model=LessonPlan)
async def get_lesson(plan_id: str, catalog: LessonCatalog = Depends(get_catalog)):
	plan = catalog.get(plan_id)
	if plan is None:
		raise HTTPException(status_code=404, detail="Lesson plan not found")
	return plan


@router.post("/analyze", response_model=LessonCritique)
async def analyze_lesson(
	content: str = Form(""),
	target_lesson: Optional[str] = Form(None),
	curriculum: str = Form("Current Curriculum"),
	alignment_mode: bool = Form(False),
	file: Optional[UploadFile] = File(None),
	gateway: CoachingGateway = Depends(get_gateway),
):
	attachment = await read_upload(file)
	if not content.strip() and attachment is None:
		raise HTTPException(status_code=400, detail="lesson content or a curriculum file is required")
	result = await gateway.analyze_lesson_plan(
		content,
		curriculum,
		attachment=attachment,
		target_lesson=target_lesson,
		alignment_mode=alignment_mode,
	)
	return unwrap_report(result)


@router.post("/rewrite", response_model=StructuredLessonPlan)
async def rewrite_lesson(req: RewriteRequest, gateway: CoachingGateway = Depends(get_gateway)):
	result = await gateway.rewrite_lesson_plan(
		req.content.strip() or "Curriculum Context",
		req.suggestions,
		target_lesson=req.target_lesson,
	)
	return unwrap_report(result)
