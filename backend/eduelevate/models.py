from __future__ import annotations
from enum import Enum, IntEnum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictFloat

from .reports import StructuredLessonPlan


class Tier(IntEnum):
	"""Intervention level. Tier 1 is core instruction, tier 3 is intensive."""

	CORE = 1
	TARGETED = 2
	INTENSIVE = 3


class Curriculum(str, Enum):
	AMPLIFY = "Amplify"
	BLUEBONNET = "Bluebonnet"
	OTHER = "Other"


class LessonStatus(str, Enum):
	DRAFT = "draft"
	ANALYZED = "analyzed"
	REWRITTEN = "rewritten"


DEFAULT_GRADE = "K"


class Student(BaseModel):
	# Snapshots are immutable; the store swaps in updated copies
	model_config = ConfigDict(frozen=True)

	id: str
	name: str
	grade: str = DEFAULT_GRADE
	tier: Tier = Tier.CORE
	accommodations: str = ""
	behavior_plan: str = ""
	iep_notes: str = ""
	is_ell: bool = False
	scores: Tuple[float, ...] = ()
	mclass_boy: Optional[float] = None
	map_boy: Optional[float] = None

	@property
	def has_iep(self) -> bool:
		return bool(self.iep_notes.strip())


class StudentDraft(BaseModel):
	"""Fields a caller may supply when creating a student. Only name is required."""

	name: str = ""
	grade: Optional[str] = None
	tier: Tier = Tier.CORE
	accommodations: str = ""
	behavior_plan: str = ""
	iep_notes: str = ""
	is_ell: bool = False
	scores: Tuple[StrictFloat, ...] = ()
	mclass_boy: Optional[StrictFloat] = None
	map_boy: Optional[StrictFloat] = None


class ProfilePatch(BaseModel):
	# Anything outside the notes fields (name, tier, scores...) is dropped
	model_config = ConfigDict(extra="ignore")

	accommodations: Optional[str] = None
	behavior_plan: Optional[str] = None
	iep_notes: Optional[str] = None
	is_ell: Optional[bool] = None


class LessonPlan(BaseModel):
	model_config = ConfigDict(frozen=True)

	id: str
	title: str
	curriculum: Curriculum = Curriculum.OTHER
	content: str = ""
	status: LessonStatus = LessonStatus.DRAFT
	structured_rewrite: Optional[StructuredLessonPlan] = Field(default=None)
