"""Prompt builders for each coaching report kind.

Every builder returns ``(system_instruction, prompt)``. The prompt always
spells out the exact JSON keys the matching schema in ``reports`` expects.
"""

from __future__ import annotations
import json
from typing import Any, Callable, Dict, Tuple

from .constants import FUNDAMENTAL_5, GROWTH_LADDER, LESSON_FLOW, PAX_KERNELS, ttess_dimension_lines
from .reports import ReportKind

BRIDGE_PLAN_KEYS = "bridge_plan (object with focus_skill, two_moves (array of exactly 2 strings), easier_version, success_signal)"
TTESS_KEYS = "ttess_alignment (array of objects with dimension, score (number 1-5), evidence)"

_LADDER = " -> ".join(GROWTH_LADDER)
_FLOW = " -> ".join(LESSON_FLOW)


def _ttess_block(alignment_mode: bool) -> str:
	if not alignment_mode:
		return "DO NOT use numeric scores or appraisal language."
	dims = "\n".join(f"- {line}" for line in ttess_dimension_lines())
	return "Additionally, map feedback to these TTESS rubric dimensions (Distinguished descriptors):\n" + dims


def _lesson_critique(context: str, notes: Dict[str, Any], alignment_mode: bool) -> Tuple[str, str]:
	system = (
		"You are a veteran Instructional Coach for Pre-K to 2nd Grade.\n"
		"Your goal is to provide supportive, private feedback focused on GROWTH.\n"
		f"{_ttess_block(alignment_mode)}\n"
		f"Identify the most relevant rung from the Growth Ladder ({_LADDER})."
	)
	keys = "rating (string), strengths (array of strings), suggestions (array of strings), ladder_rung (string)"
	if alignment_mode:
		keys += f", {TTESS_KEYS}"
	prompt = (
		f"Audit this lesson from {notes.get('curriculum') or 'Current Curriculum'}.\n"
		f"Target: \"{notes.get('target_lesson') or 'Primary'}\"\n"
		f"Teacher Notes: {context}\n\n"
		"Check for:\n"
		f"1. Fundamental 5 Framing ({FUNDAMENTAL_5[0]}).\n"
		"2. Anticipated Misconceptions (Issue, Cause, Correction).\n"
		"3. Talk Balance targets.\n\n"
		f"Return ONLY a JSON object with keys: {keys}."
	)
	return system, prompt


def _lesson_rewrite(context: str, notes: Dict[str, Any], alignment_mode: bool) -> Tuple[str, str]:
	system = (
		"You are an instructional coaching engine for Pre-K-2 classrooms.\n"
		"Generate a DISTINGUISHED Model Lesson Plan and a Proficient+1 Bridge Plan (scaffolded next step).\n"
		"REQUIRED COMPONENTS:\n"
		"- Fundamental 5: WE WILL (teacher focus) and I WILL (student focus).\n"
		"- 2+ Misconceptions: issue, cause, correction.\n"
		"- Talk Balance Target (e.g., 55/45).\n"
		f"- Flow: {_FLOW}.\n"
		f"- One PAX kernel from: {', '.join(PAX_KERNELS)}."
	)
	suggestions = notes.get("suggestions") or []
	prompt = (
		f"Rewrite the lesson: \"{notes.get('target_lesson') or 'Primary'}\"\n"
		f"Suggestions: {', '.join(str(s) for s in suggestions)}\n"
		f"Context: {context}\n\n"
		"Return ONLY a JSON object with keys: "
		"overview (object with grade, subject, standards, learning_objective, success_criteria, vocabulary, talk_balance_target), "
		"we_will (string), i_will (string), "
		"misconceptions (array of objects with issue, cause, correction), "
		"phases (array of objects with name, teacher_actions, student_actions, engagement_strategy, quick_check), "
		"differentiation (object with below, on, above), "
		"classroom_culture (object with pax_kernel, attention_signal), "
		f"{BRIDGE_PLAN_KEYS}, "
		"exit_ticket_design (object with skill, mastery_rule)."
	)
	return system, prompt


def _observation(context: str, notes: Dict[str, Any], alignment_mode: bool) -> Tuple[str, str]:
	system = (
		"You are an instructional growth partner. Analyze the classroom recording.\n"
		"REQUIRED:\n"
		"1. Talk Balance Ratio (% Teacher vs % Student) with evidence quotes.\n"
		"2. Misconception Handling Review (evidence quote + timestamp).\n"
		"3. Lesson Flow Review (compare to the plan: matched / missing / adjust).\n"
		f"4. Proficient+1 Next Step (one Growth Ladder rung from {_LADDER} + 2 moves).\n"
		"5. GROWTH TONE. Avoid 'gotcha' language.\n"
		f"{_ttess_block(alignment_mode)}"
	)
	keys = (
		"alignment_summary (object with level, strength, growth), "
		"talk_balance (object with teacher_percentage (number), student_percentage (number), "
		"evidence (array of objects with quote, type ('teacher' or 'student'), timestamp), missed_opportunity, action_step), "
		"misconception_review (array of objects with appeared, response, resolved (boolean), suggestion), "
		"flow_analysis (array of objects with phase, what_matched, what_was_missing, adjustment), "
		f"{BRIDGE_PLAN_KEYS}, "
		"next_adjustments (object with keep, adjust, add; each an array of strings)"
	)
	if alignment_mode:
		keys += f", {TTESS_KEYS}"
	prompt = (
		f"Audio Transcript Context: {context or 'See attached recording.'}\n"
		f"Original Plan: {notes.get('original_plan') or ''}\n"
		f"Notes: {notes.get('teacher_notes') or ''}\n\n"
		f"Return ONLY a JSON object with keys: {keys}."
	)
	return system, prompt


def _exit_tickets(context: str, notes: Dict[str, Any], alignment_mode: bool) -> Tuple[str, str]:
	system = (
		"You are a learning analysis engine for Pre-K-2.\n"
		"Analyze student work and group results.\n"
		"REQUIRED:\n"
		"- Misconception Mapping: primary and secondary misconceptions.\n"
		"- Next Day Plan: short reteach cycle.\n"
		"- Bridge Plan: recommend one Growth Ladder rung."
	)
	names = notes.get("student_names") or []
	prompt = (
		f"Analyze the attached exit ticket images. Match to students: {', '.join(names)}.\n"
		f"{context}\n\n"
		"Return ONLY a JSON object with keys: "
		"snapshot (object with skill, total_students (integer), mastery_criteria), "
		"performance_bands (object with got_it, almost, not_yet; each an object with count (integer) and names (array of strings)), "
		"misconception_mapping (object with primary, secondary, reteach_strategy), "
		f"{BRIDGE_PLAN_KEYS}, "
		"next_day_plan (object with reteach_strategy, reteach_example, reinforce_strategy, extension_task), "
		"student_data (array of objects with name, score (number), suggested_tier (1, 2 or 3), observation)."
	)
	return system, prompt


def _reflection(context: str, notes: Dict[str, Any], alignment_mode: bool) -> Tuple[str, str]:
	system = "You are an instructional coach writing a private, growth-focused reflection for a Pre-K-2 teacher."
	prompt = (
		"Synthesize results.\n"
		f"Observation: {json.dumps(notes.get('observation') or {})}\n"
		f"Exit Tickets: {json.dumps(notes.get('exit_tickets') or {})}\n"
		f"{context}\n\n"
		"Return ONLY a JSON object with keys: "
		"lesson_info (object with teacher, date, subject), "
		"implementation_snapshot (array of objects with phase, strengths, growth_areas), "
		"student_results (object with mastery_rate, bands), "
		"bridge_plan_history (array of strings), growth_mindset_statement (string), action_steps (array of strings)."
	)
	return system, prompt


def _growth_trend(context: str, notes: Dict[str, Any], alignment_mode: bool) -> Tuple[str, str]:
	system = (
		"You are an instructional coach tracking a teacher's professional growth over time.\n"
		f"Summarize progress along the Growth Ladder ({_LADDER})."
	)
	prompt = (
		"Analyze history.\n"
		f"Lessons: {json.dumps(notes.get('lessons') or [])}\n"
		f"Students: {json.dumps(notes.get('students') or [])}\n"
		f"{context}\n\n"
		"Return ONLY a JSON object with keys: overall_trend (string), "
		"metric_snapshots (array of objects with metric, value (string), trend ('up', 'down' or 'stable')), "
		"growth_insights (array of strings), ladder_progress (string)."
	)
	return system, prompt


PROMPT_BUILDERS: Dict[ReportKind, Callable[[str, Dict[str, Any], bool], Tuple[str, str]]] = {
	ReportKind.LESSON_CRITIQUE: _lesson_critique,
	ReportKind.LESSON_REWRITE: _lesson_rewrite,
	ReportKind.OBSERVATION: _observation,
	ReportKind.EXIT_TICKETS: _exit_tickets,
	ReportKind.REFLECTION: _reflection,
	ReportKind.GROWTH_TREND: _growth_trend,
}


def build_prompt(kind: ReportKind, context: str, notes: Dict[str, Any], alignment_mode: bool) -> Tuple[str, str]:
	return PROMPT_BUILDERS[kind](context, notes, alignment_mode)
