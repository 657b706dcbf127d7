from typing import Dict, List

# Texas Teacher Evaluation and Support System, "Distinguished" descriptors
TTESS_RUBRIC: Dict[str, Dict] = {
	"DOMAIN_1": {
		"title": "Planning",
		"dimensions": {
			"1.1": {
				"name": "Standards and Alignment",
				"distinguished": "All rigorous and measurable goals aligned to state standards. Activities and assessments logically sequenced, relevant to prior understanding, and integrate concepts from other disciplines. Objectives aligned to the lesson's goal with extensions.",
			},
			"1.2": {
				"name": "Data and Assessment",
				"distinguished": "Formal and informal assessments to monitor all students. Students engage in self-assessment and build awareness of strengths/weaknesses. Substantive, timely feedback provided. Analysis used to adjust instructional strategies.",
			},
			"1.3": {
				"name": "Knowledge of Students",
				"distinguished": "Lessons connect to students' prior knowledge, experiences, interests and future expectations. Guidance for students to apply strengths. Opportunities for students to utilize individual learning patterns and habits.",
			},
			"1.4": {
				"name": "Activities",
				"distinguished": "Students generate questions that lead to further inquiry. Complex higher-order thinking and real-world application. Groups based on needs allows students to take ownership. Student self-reflection and evaluation.",
			},
		},
	},
	"DOMAIN_2": {
		"title": "Instruction",
		"dimensions": {
			"2.1": {
				"name": "Achieving Expectations",
				"distinguished": "Students establish high academic and social-emotional expectations for themselves. Persists until all students demonstrate mastery. Students self-monitor and self-correct. Systematic goal setting.",
			},
			"2.2": {
				"name": "Content Knowledge and Expertise",
				"distinguished": "Displays extensive content knowledge. Integrates learning objectives across disciplines. Consistently anticipates student misunderstandings and proactively develops teaching techniques to mitigate concerns.",
			},
			"2.3": {
				"name": "Communication",
				"distinguished": "Safe and effective communication with peers. Addresses student misunderstandings at strategic points. Explanations are clear and use verbal/written communication. Balances wait time and questioning. Skilfully provokes inquiry.",
			},
			"2.4": {
				"name": "Differentiation",
				"distinguished": "Adapts lessons with a wide variety of instructional strategies to address individual needs. Consistently monitors quality of student participation. Prevents student confusion or disengagement by addressing needs.",
			},
			"2.5": {
				"name": "Monitor and Adjust",
				"distinguished": "Systematically gathers input from students in order to monitor and adjust instruction. Adjusts pacing and activities to respond to differences in needs. Uses discreet and explicit checks.",
			},
		},
	},
	"DOMAIN_3": {
		"title": "Learning Environment",
		"dimensions": {
			"3.1": {
				"name": "Environment, Routines and Procedures",
				"distinguished": "Establishes and uses effective routines where students take primary leadership and responsibility for managing groups, supplies, and equipment. Classroom is safe and thoughtfully designed.",
			},
			"3.2": {
				"name": "Managing Student Behavior",
				"distinguished": "Consistently monitors behavior subtly and reinforces positive behaviors. Intercepts misbehavior fluidly. Students create, adopt, and maintain behavior standards.",
			},
			"3.3": {
				"name": "Classroom Culture",
				"distinguished": "Engages all students with relevant, meaningful learning, sometimes adjusting lessons based on student interests and abilities. Positive rapport amongst students. Students collaborate positively.",
			},
		},
	},
}

FUNDAMENTAL_5: List[str] = [
	"Frame the Lesson (We Will / I Will)",
	"Work in the Power Zone",
	"Frequent Small Group Purposeful Talk",
	"Recognize & Reinforce",
	"Write Critically",
]

PAX_KERNELS: List[str] = [
	"Vision",
	"Quiet Signal",
	"PAX Minutes",
	"Harm-o-meter",
	"Tootles",
	"Beat the Timer",
	"Mystery Walker",
	"Granny's Wacky Prizes",
]

# Rungs in order; a bridge plan always targets exactly one
GROWTH_LADDER: List[str] = [
	"Clarity",
	"CFUs",
	"Student Talk",
	"Misconceptions",
	"Differentiation",
]

LESSON_FLOW: List[str] = ["Do Now", "I Do", "We Do", "You Do", "Closure"]


def ttess_dimension_lines() -> List[str]:
	lines: List[str] = []
	for domain in TTESS_RUBRIC.values():
		for code, dim in domain["dimensions"].items():
			lines.append(f"{code} {dim['name']} ({domain['title']}): {dim['distinguished']}")
	return lines
