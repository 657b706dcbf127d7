from __future__ import annotations
from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from ..deps import get_gateway, get_store, read_upload, unwrap_report
from ..gateway import CoachingGateway
from ..reports import ExitTicketAnalysis
from ..roster import StudentStore

router = APIRouter(prefix="/exit-tickets", tags=["exit_tickets"])


@router.post("/analyze", response_model=ExitTicketAnalysis)
async def analyze_exit_tickets(
	files: List[UploadFile] = File(...),
	store: StudentStore = Depends(get_store),
	gateway: CoachingGateway = Depends(get_gateway),
):
	images = []
	for f in files:
		attachment = await read_upload(f)
		if attachment is not None:
			images.append(attachment)
	if not images:
		raise HTTPException(status_code=400, detail="at least one exit ticket image is required")
	# Names are a snapshot; suggested tiers in the report are not applied to the roster
	result = await gateway.analyze_exit_tickets(images, store.names())
	return unwrap_report(result)
