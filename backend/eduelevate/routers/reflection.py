from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..deps import get_gateway, unwrap_report
from ..gateway import CoachingGateway
from ..reports import ExitTicketAnalysis, InstructionalReflectionReport, ObservationAnalysis

router = APIRouter(prefix="/reflection", tags=["reflection"])


class ReflectionRequest(BaseModel):
	observation: ObservationAnalysis
	exit_tickets: ExitTicketAnalysis


@router.post("", response_model=InstructionalReflectionReport)
async def reflection(req: ReflectionRequest, gateway: CoachingGateway = Depends(get_gateway)):
	result = await gateway.generate_reflection_report(
		req.observation.model_dump(mode="json", exclude={"kind"}),
		req.exit_tickets.model_dump(mode="json", exclude={"kind"}),
	)
	return unwrap_report(result)
