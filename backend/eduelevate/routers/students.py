from __future__ import annotations
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile
from pydantic import BaseModel

from .. import metrics
from ..bulk_import import decode_upload
from ..deps import get_store, read_upload_bytes
from ..models import ProfilePatch, StudentDraft
from ..roster import StudentStore, parse_score, parse_tier

router = APIRouter(prefix="/students", tags=["students"])


class TierRequest(BaseModel):
	# Checked by parse_tier; true and 2.0 arrive uncoerced
	tier: Any


class ScoreRequest(BaseModel):
	# "85" typed into a form is accepted like 85; parse_score decides
	value: Any


def _require(store: StudentStore, student_id: str):
	student = store.get(student_id)
	if student is None:
		raise HTTPException(status_code=404, detail="Student not found")
	return student


@router.get("")
async def list_students(store: StudentStore = Depends(get_store)) -> List[Dict[str, Any]]:
	return [metrics.student_overview(s) for s in store.list()]


@router.post("", status_code=201)
async def add_student(draft: StudentDraft, store: StudentStore = Depends(get_store)):
	# The store drops blank names silently; tell the caller why nothing happened
	if not (draft.name or "").strip():
		raise HTTPException(status_code=400, detail="name is required")
	student = store.add_student(draft)
	if student is None:
		raise HTTPException(status_code=400, detail="scores must be finite numbers")
	return metrics.student_overview(student)


@router.get("/summary")
async def summary(store: StudentStore = Depends(get_store)):
	return metrics.roster_summary(store.list())


@router.post("/import", status_code=201)
async def import_roster(file: UploadFile = File(...), store: StudentStore = Depends(get_store)):
	text = decode_upload(await read_upload_bytes(file))
	created = store.import_roster(text)
	return {"imported": len(created), "students": [metrics.student_overview(s) for s in created]}


@router.get("/{student_id}")
async def get_student(student_id: str, store: StudentStore = Depends(get_store)):
	return metrics.student_overview(_require(store, student_id))


@router.patch("/{student_id}/profile")
async def update_profile(student_id: str, patch: ProfilePatch, store: StudentStore = Depends(get_store)):
	_require(store, student_id)
	return metrics.student_overview(store.update_profile(student_id, patch))


@router.put("/{student_id}/tier")
async def set_tier(student_id: str, req: TierRequest, store: StudentStore = Depends(get_store)):
	_require(store, student_id)
	if parse_tier(req.tier) is None:
		raise HTTPException(status_code=422, detail="tier must be 1, 2 or 3")
	return metrics.student_overview(store.set_tier(student_id, req.tier))


@router.post("/{student_id}/scores")
async def append_score(student_id: str, req: ScoreRequest, store: StudentStore = Depends(get_store)):
	_require(store, student_id)
	if parse_score(req.value) is None:
		raise HTTPException(status_code=400, detail="score must be a finite number")
	return metrics.student_overview(store.append_score(student_id, req.value))


@router.get("/{student_id}/progress")
async def progress(student_id: str, store: StudentStore = Depends(get_store)):
	student = _require(store, student_id)
	latest = metrics.latest_score(student.scores)
	series = metrics.trend_series(student.scores)
	return {
		"student_id": student.id,
		"name": student.name,
		"latest_score": latest,
		"band": metrics.band(latest).value if latest is not None else None,
		"points": metrics.chart_points(student.scores),
		"insufficient_data": series is None,
		"trend": [list(p) for p in series] if series is not None else [],
		"baseline": {"mclass_boy": student.mclass_boy, "map_boy": student.map_boy},
	}


@router.delete("/{student_id}", status_code=204)
async def remove_student(student_id: str, store: StudentStore = Depends(get_store)) -> Response:
	store.remove_student(student_id)
	return Response(status_code=204)
