"""
In-memory student roster.

The store owns every Student record. Callers get frozen snapshots back and
change a record only through the operations below. A rejected operation
(blank name, unknown id, bad tier, non-finite score) is a silent no-op:
the return value is None/False and the store keeps its last good state.
"""

from __future__ import annotations
import logging
import math
import uuid
from numbers import Real
from typing import Dict, Iterable, Iterator, List, Optional, Set, Union

from .bulk_import import filter_names, parse_roster
from .models import DEFAULT_GRADE, ProfilePatch, Student, StudentDraft, Tier

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("accommodations", "behavior_plan", "iep_notes", "is_ell")


def parse_score(value: Union[str, float, int, None]) -> Optional[float]:
	"""Return the value as a finite float, or None if it cannot be one."""
	if value is None or isinstance(value, bool):
		return None
	if isinstance(value, str):
		try:
			number = float(value.strip())
		except ValueError:
			return None
	elif isinstance(value, Real):
		number = float(value)
	else:
		return None
	if not math.isfinite(number):
		return None
	return number


def parse_tier(value: Union[Tier, int, None]) -> Optional[Tier]:
	if isinstance(value, bool) or not isinstance(value, int):
		return None
	try:
		return Tier(value)
	except ValueError:
		return None


class StudentStore:
	def __init__(self, seed: Optional[Iterable[StudentDraft]] = None) -> None:
		self._students: Dict[str, Student] = {}
		# Every id ever handed out, so removed ids are never reissued
		self._issued_ids: Set[str] = set()
		for draft in seed or ():
			self.add_student(draft)

	# ------------------------------------------------------------------
	# Reads
	# ------------------------------------------------------------------

	def __len__(self) -> int:
		return len(self._students)

	def __contains__(self, student_id: object) -> bool:
		return student_id in self._students

	def __iter__(self) -> Iterator[Student]:
		return iter(list(self._students.values()))

	def get(self, student_id: str) -> Optional[Student]:
		return self._students.get(student_id)

	def list(self) -> List[Student]:
		return list(self._students.values())

	def ids(self) -> List[str]:
		return list(self._students)

	def names(self) -> List[str]:
		return [s.name for s in self._students.values()]

	# ------------------------------------------------------------------
	# Mutations
	# ------------------------------------------------------------------

	def _new_id(self) -> str:
		student_id = uuid.uuid4().hex
		while student_id in self._issued_ids:
			student_id = uuid.uuid4().hex
		self._issued_ids.add(student_id)
		return student_id

	def add_student(self, draft: StudentDraft) -> Optional[Student]:
		name = (draft.name or "").strip()
		if not name:
			logger.debug("add_student ignored: blank name")
			return None
		scores = tuple(parse_score(v) for v in draft.scores)
		baselines = (draft.mclass_boy, draft.map_boy)
		if None in scores or any(b is not None and parse_score(b) is None for b in baselines):
			logger.debug("add_student ignored: non-finite score for %r", name)
			return None
		student = Student(
			id=self._new_id(),
			name=name,
			grade=(draft.grade or "").strip() or DEFAULT_GRADE,
			tier=draft.tier,
			accommodations=draft.accommodations,
			behavior_plan=draft.behavior_plan,
			iep_notes=draft.iep_notes,
			is_ell=draft.is_ell,
			scores=scores,
			mclass_boy=draft.mclass_boy,
			map_boy=draft.map_boy,
		)
		self._students[student.id] = student
		logger.info("Added student %s", student.id)
		return student

	def update_profile(self, student_id: str, patch: ProfilePatch) -> Optional[Student]:
		current = self._students.get(student_id)
		if current is None:
			logger.debug("update_profile ignored: unknown id %s", student_id)
			return None
		changes = {k: v for k, v in patch.model_dump(exclude_none=True).items() if k in PROFILE_FIELDS}
		if not changes:
			return current
		updated = current.model_copy(update=changes)
		self._students[student_id] = updated
		return updated

	def set_tier(self, student_id: str, tier: Union[Tier, int]) -> Optional[Student]:
		new_tier = parse_tier(tier)
		current = self._students.get(student_id)
		if new_tier is None or current is None:
			logger.debug("set_tier ignored: id=%s tier=%r", student_id, tier)
			return None
		updated = current.model_copy(update={"tier": new_tier})
		self._students[student_id] = updated
		return updated

	def append_score(self, student_id: str, value: Union[str, float, int]) -> Optional[Student]:
		score = parse_score(value)
		current = self._students.get(student_id)
		if score is None or current is None:
			logger.debug("append_score ignored: id=%s value=%r", student_id, value)
			return None
		updated = current.model_copy(update={"scores": current.scores + (score,)})
		self._students[student_id] = updated
		return updated

	def remove_student(self, student_id: str) -> bool:
		removed = self._students.pop(student_id, None)
		if removed is not None:
			logger.info("Removed student %s", student_id)
		return removed is not None

	def _add_all(self, drafts: Iterable[StudentDraft]) -> List[Student]:
		created: List[Student] = []
		for draft in drafts:
			student = self.add_student(draft)
			if student is not None:
				created.append(student)
		logger.info("Bulk import added %d students", len(created))
		return created

	def bulk_add(self, names: Iterable[Optional[str]]) -> List[Student]:
		return self._add_all(StudentDraft(name=name) for name in filter_names(names))

	def import_roster(self, text: str) -> List[Student]:
		return self._add_all(parse_roster(text))
