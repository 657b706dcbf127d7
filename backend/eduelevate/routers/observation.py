from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from ..deps import get_catalog, get_gateway, read_upload, unwrap_report
from ..gateway import CoachingGateway
from ..lessons import LessonCatalog
from ..reports import ObservationAnalysis

router = APIRouter(prefix="/observation", tags=["observation"])


@router.post("/analyze", response_model=ObservationAnalysis)
async def analyze_observation(
	plan_id: Optional[str] = Form(None),
	transcript: str = Form(""),
	notes: Optional[str] = Form(None),
	alignment_mode: bool = Form(False),
	file: Optional[UploadFile] = File(None),
	catalog: LessonCatalog = Depends(get_catalog),
	gateway: CoachingGateway = Depends(get_gateway),
):
	"""Review a classroom recording against the lesson plan it was meant to follow."""
	original_plan = ""
	if plan_id:
		plan = catalog.get(plan_id)
		if plan is None:
			raise HTTPException(status_code=404, detail="Lesson plan not found")
		original_plan = plan.content
	media = await read_upload(file)
	if media is None and not transcript.strip():
		raise HTTPException(status_code=400, detail="a recording or a transcript is required")
	result = await gateway.analyze_observation(
		transcript,
		original_plan,
		teacher_notes=notes,
		media=media,
		alignment_mode=alignment_mode,
	)
	return unwrap_report(result)
