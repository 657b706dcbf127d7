from __future__ import annotations
from typing import Dict, Iterable, List, Optional

from .models import LessonPlan


class LessonCatalog:
	"""Seeded lesson plans, looked up by id when building coaching requests."""

	def __init__(self, plans: Optional[Iterable[LessonPlan]] = None) -> None:
		self._plans: Dict[str, LessonPlan] = {p.id: p for p in plans or ()}

	def __len__(self) -> int:
		return len(self._plans)

	def list(self) -> List[LessonPlan]:
		return list(self._plans.values())

	def get(self, plan_id: str) -> Optional[LessonPlan]:
		return self._plans.get(plan_id)
