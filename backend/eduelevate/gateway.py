"""
Coaching-Request Gateway
========================

Turns a ``CoachingRequest`` into one validated report variant. The model is
an opaque boundary: whatever goes wrong (no API key, timeout, HTTP error,
non-JSON reply, schema mismatch) the caller receives ``AnalysisFailed`` and
nothing else. There is no retry and no partial result.

Store data only ever enters here as JSON snapshots; reports are never
written back into the roster.
"""

from __future__ import annotations
import json
import logging
import re
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from pydantic import BaseModel, Field, ValidationError

from .attachments import Attachment
from .gemini_client import GeminiClient, GeminiError
from .models import LessonPlan, Student
from .prompts import build_prompt
from .reports import (
	REPORT_TYPES,
	AnalysisFailed,
	CoachingReport,
	CoachingResult,
	ExitTicketAnalysis,
	GrowthTrendReport,
	InstructionalReflectionReport,
	LessonCritique,
	ObservationAnalysis,
	ReportKind,
	StructuredLessonPlan,
)
from .settings import settings

logger = logging.getLogger(__name__)

# Report kinds that go to the heavier model
PRO_MODEL_KINDS = {ReportKind.LESSON_REWRITE, ReportKind.REFLECTION, ReportKind.GROWTH_TREND}

ClientFactory = Callable[[str], GeminiClient]


class RequestFlags(BaseModel):
	alignment_mode: bool = False


class CoachingRequest(BaseModel):
	kind: ReportKind
	context: str = ""
	notes: Dict[str, Any] = Field(default_factory=dict)
	attachments: List[Attachment] = Field(default_factory=list)
	flags: RequestFlags = Field(default_factory=RequestFlags)


def _extract_json_object(text: str) -> Dict[str, Any]:
	"""Pull a JSON object out of raw model text (bare, fenced, or embedded)."""
	try:
		data = json.loads(text)
		if isinstance(data, dict):
			return data
	except ValueError:
		pass
	code_block = re.search(r"```(?:json)?\s*([\s\S]*?)\s*```", text)
	if code_block:
		try:
			data = json.loads(code_block.group(1))
			if isinstance(data, dict):
				return data
		except ValueError:
			pass
	first = text.find("{")
	last = text.rfind("}")
	if first != -1 and last != -1 and last > first:
		try:
			data = json.loads(text[first : last + 1])
			if isinstance(data, dict):
				return data
		except ValueError:
			pass
	raise ValueError("model did not return a JSON object")


def _default_client_factory(model: str) -> GeminiClient:
	return GeminiClient(model=model)


class CoachingGateway:
	def __init__(self, client_factory: Optional[ClientFactory] = None) -> None:
		self._client_factory = client_factory or _default_client_factory

	def model_for(self, kind: ReportKind) -> str:
		return settings.gemini_model_pro if kind in PRO_MODEL_KINDS else settings.gemini_model

	async def request(self, req: CoachingRequest) -> CoachingResult:
		try:
			report = await self._run(req)
		except (GeminiError, ValueError, ValidationError) as err:
			# ValueError covers a missing API key and unparseable replies
			logger.warning("Coaching request %s failed: %s", req.kind.value, err)
			return AnalysisFailed(requested=req.kind)
		logger.info("Coaching request %s succeeded", req.kind.value)
		return report

	async def _run(self, req: CoachingRequest) -> CoachingReport:
		alignment_mode = req.flags.alignment_mode
		system, prompt = build_prompt(req.kind, req.context, req.notes, alignment_mode)
		parts: List[Dict[str, Any]] = [{"text": prompt}]
		parts.extend(a.to_part() for a in req.attachments)
		client = self._client_factory(self.model_for(req.kind))
		try:
			raw = await client.generate_multimodal(parts, system_instruction=system, json_mode=True)
		finally:
			await client.aclose()
		data = _extract_json_object(raw)
		data["kind"] = req.kind.value
		if not alignment_mode:
			data.pop("ttess_alignment", None)
		return REPORT_TYPES[req.kind].model_validate(data)

	# ------------------------------------------------------------------
	# One coroutine per screen of the dashboard
	# ------------------------------------------------------------------

	async def analyze_lesson_plan(
		self,
		content: str,
		curriculum: str,
		*,
		attachment: Optional[Attachment] = None,
		target_lesson: Optional[str] = None,
		alignment_mode: bool = False,
	) -> LessonCritique | AnalysisFailed:
		return await self.request(CoachingRequest(
			kind=ReportKind.LESSON_CRITIQUE,
			context=content,
			notes={"curriculum": curriculum, "target_lesson": target_lesson},
			attachments=[attachment] if attachment else [],
			flags=RequestFlags(alignment_mode=alignment_mode),
		))

	async def rewrite_lesson_plan(
		self,
		content: str,
		suggestions: Sequence[str],
		*,
		target_lesson: Optional[str] = None,
	) -> StructuredLessonPlan | AnalysisFailed:
		return await self.request(CoachingRequest(
			kind=ReportKind.LESSON_REWRITE,
			context=content,
			notes={"suggestions": list(suggestions), "target_lesson": target_lesson},
		))

	async def analyze_observation(
		self,
		transcript: str,
		original_plan: str,
		*,
		teacher_notes: Optional[str] = None,
		media: Optional[Attachment] = None,
		alignment_mode: bool = False,
	) -> ObservationAnalysis | AnalysisFailed:
		return await self.request(CoachingRequest(
			kind=ReportKind.OBSERVATION,
			context=transcript,
			notes={"original_plan": original_plan, "teacher_notes": teacher_notes},
			attachments=[media] if media else [],
			flags=RequestFlags(alignment_mode=alignment_mode),
		))

	async def analyze_exit_tickets(
		self,
		images: Iterable[Attachment],
		student_names: Sequence[str],
	) -> ExitTicketAnalysis | AnalysisFailed:
		return await self.request(CoachingRequest(
			kind=ReportKind.EXIT_TICKETS,
			notes={"student_names": list(student_names)},
			attachments=list(images),
		))

	async def generate_reflection_report(
		self,
		observation: Dict[str, Any],
		exit_tickets: Dict[str, Any],
	) -> InstructionalReflectionReport | AnalysisFailed:
		return await self.request(CoachingRequest(
			kind=ReportKind.REFLECTION,
			notes={"observation": observation, "exit_tickets": exit_tickets},
		))

	async def generate_growth_trend(
		self,
		lessons: Iterable[LessonPlan],
		students: Iterable[Student],
	) -> GrowthTrendReport | AnalysisFailed:
		return await self.request(CoachingRequest(
			kind=ReportKind.GROWTH_TREND,
			notes={
				"lessons": [p.model_dump(mode="json") for p in lessons],
				"students": [s.model_dump(mode="json") for s in students],
			},
		))
