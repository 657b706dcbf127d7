from typing import List

from .models import Curriculum, LessonPlan, LessonStatus, StudentDraft, Tier

DEMO_STUDENTS: List[StudentDraft] = [
	StudentDraft(
		name="Liam Garcia",
		grade="1st",
		tier=Tier.CORE,
		accommodations="Front seating",
		is_ell=True,
		scores=(85, 78, 82, 88, 91),
		mclass_boy=82,
		map_boy=78,
	),
	StudentDraft(
		name="Sophia Chen",
		grade="1st",
		tier=Tier.TARGETED,
		accommodations="ESL Support",
		iep_notes="Visual aids",
		scores=(65, 62, 70, 68, 72),
		mclass_boy=60,
		map_boy=65,
	),
]

DEMO_LESSON_PLANS: List[LessonPlan] = [
	LessonPlan(
		id="l1",
		title="ELA - Phonics Intro",
		curriculum=Curriculum.AMPLIFY,
		content="CVC blended sounds focus.",
		status=LessonStatus.ANALYZED,
	),
]
