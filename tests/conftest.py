"""
Shared fixtures. Gemini is never contacted: every client is built on an
httpx.MockTransport that answers with canned JSON reports.
"""
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from eduelevate.gateway import CoachingGateway
from eduelevate.gemini_client import GeminiClient
from eduelevate.lessons import LessonCatalog
from eduelevate.main import create_app
from eduelevate.models import StudentDraft
from eduelevate.roster import StudentStore
from eduelevate.seed import DEMO_LESSON_PLANS

BRIDGE_PLAN = {
    "focus_skill": "Student Talk",
    "two_moves": ["Turn and talk after each I Do example", "Wait 3 seconds before calling on anyone"],
    "easier_version": "One turn-and-talk during We Do",
    "success_signal": "Every pair shares one sentence",
}

REPORTS = {
    "lesson_critique": {
        "rating": "Proficient",
        "strengths": ["Clear We Will / I Will framing"],
        "suggestions": ["Anticipate the short-vowel confusion", "Add a quick check after We Do"],
        "ladder_rung": "CFUs",
        "ttess_alignment": [{"dimension": "2.5 Monitor and Adjust", "score": 3, "evidence": "One CFU"}],
    },
    "lesson_rewrite": {
        "overview": {
            "grade": "1st",
            "subject": "ELA",
            "standards": "TEKS 1.2.B",
            "learning_objective": "Blend CVC words",
            "success_criteria": "Read 8 of 10 CVC words",
            "vocabulary": "blend, vowel",
            "talk_balance_target": "55% Teacher / 45% Student",
        },
        "we_will": "We will blend sounds to read CVC words.",
        "i_will": "I will read CVC words by blending each sound.",
        "misconceptions": [
            {"issue": "Reads letters separately", "cause": "No continuous blending", "correction": "Model stretch-and-slide"},
            {"issue": "Swaps short e and i", "cause": "Similar mouth shape", "correction": "Mirror work"},
        ],
        "phases": [
            {"name": "Do Now", "teacher_actions": "Display 3 words", "student_actions": "Whisper-read"},
            {"name": "I Do", "teacher_actions": "Model blending", "student_actions": "Watch", "quick_check": "Thumbs"},
        ],
        "differentiation": {"below": "Picture cues", "on": "Word chains", "above": "Nonsense words"},
        "classroom_culture": {"pax_kernel": "Quiet Signal", "attention_signal": "Hand up"},
        "bridge_plan": BRIDGE_PLAN,
        "exit_ticket_design": {"skill": "CVC blending", "mastery_rule": "4 of 5 correct"},
    },
    "observation": {
        "alignment_summary": {"level": "Developing", "strength": "Pacing", "growth": "Student talk"},
        "talk_balance": {
            "teacher_percentage": 70,
            "student_percentage": 30,
            "evidence": [
                {"quote": "Watch me blend.", "type": "teacher", "timestamp": "02:10"},
                {"quote": "c-a-t, cat!", "type": "student"},
            ],
            "missed_opportunity": "Partner reading",
            "action_step": "Add turn-and-talk",
        },
        "misconception_review": [
            {"appeared": "Reading 'pen' as 'pin'", "response": "Corrected directly", "resolved": True, "suggestion": "Mirror work"}
        ],
        "flow_analysis": [
            {"phase": "We Do", "what_matched": "Choral blending", "what_was_missing": "CFU", "adjustment": "Whiteboards"}
        ],
        "bridge_plan": BRIDGE_PLAN,
        "ttess_alignment": [{"dimension": "2.3 Communication", "score": 3, "evidence": "Clear modeling"}],
        "next_adjustments": {"keep": ["Modeling"], "adjust": ["Wait time"], "add": ["Partner talk"]},
    },
    "growth_trend": {
        "overall_trend": "Steady growth in student ownership",
        "metric_snapshots": [
            {"metric": "Student talk", "value": "38%", "trend": "up"},
            {"metric": "CFUs per lesson", "value": "3", "trend": "stable"},
        ],
        "growth_insights": ["Transitions are tighter"],
        "ladder_progress": "Moving from CFUs to Student Talk",
    },
    "exit_tickets": {
        "snapshot": {"skill": "CVC blending", "total_students": 2, "mastery_criteria": "4 of 5"},
        "performance_bands": {
            "got_it": {"count": 1, "names": ["Liam Garcia"]},
            "almost": {"count": 1, "names": ["Sophia Chen"]},
            "not_yet": {"count": 0, "names": []},
        },
        "misconception_mapping": {"primary": "Vowel swaps", "secondary": "Final sound dropped", "reteach_strategy": "Elkonin boxes"},
        "bridge_plan": BRIDGE_PLAN,
        "next_day_plan": {
            "reteach_strategy": "Small group",
            "reteach_example": "pen / pin",
            "reinforce_strategy": "Word chains",
            "extension_task": "Write a CVC sentence",
        },
        "student_data": [
            {"name": "Liam Garcia", "score": 100, "suggested_tier": 1, "observation": "Fluent"},
            {"name": "Sophia Chen", "score": 60, "suggested_tier": 2, "observation": "Vowel swaps"},
        ],
    },
    "reflection": {
        "lesson_info": {"teacher": "Ms. Rivera", "date": "2026-10-19", "subject": "ELA"},
        "implementation_snapshot": [{"phase": "We Do", "strengths": "Energy", "growth_areas": "CFUs"}],
        "student_results": {"mastery_rate": "50%", "bands": "1 got it, 1 almost"},
        "bridge_plan_history": ["CFUs"],
        "growth_mindset_statement": "Each lesson adds one more voice to the room.",
        "action_steps": ["Add whiteboards to We Do"],
    },
}


def gemini_body(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class FakeGemini:
    """Records requests and answers with whatever ``reply`` holds."""

    def __init__(self, reply=None, status_code=200):
        self.reply = reply
        self.status_code = status_code
        self.requests = []

    def __call__(self, request):
        self.requests.append(json.loads(request.content.decode("utf-8")))
        if isinstance(self.reply, Exception):
            raise self.reply
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"error": {"message": "boom"}})
        text = self.reply if isinstance(self.reply, str) else json.dumps(self.reply)
        return httpx.Response(200, json=gemini_body(text))

    @property
    def last_parts(self):
        return self.requests[-1]["contents"][0]["parts"]

    @property
    def last_prompt(self):
        return self.last_parts[0]["text"]


@pytest.fixture
def reports():
    return json.loads(json.dumps(REPORTS))


@pytest.fixture
def fake_gemini():
    return FakeGemini()


@pytest.fixture
def gateway(fake_gemini):
    transport = httpx.MockTransport(fake_gemini)
    return CoachingGateway(
        client_factory=lambda model: GeminiClient(api_key="test-key", model=model, transport=transport)
    )


@pytest.fixture
def store():
    return StudentStore()


@pytest.fixture
def seeded_store():
    return StudentStore([
        StudentDraft(name="Liam Garcia", grade="1st", scores=(85, 78, 82, 88, 91), mclass_boy=82, map_boy=78, is_ell=True),
        StudentDraft(name="Sophia Chen", grade="1st", tier=2, iep_notes="Visual aids", scores=(65, 62, 70, 68, 72)),
    ])


@pytest.fixture
def client(seeded_store, gateway):
    app = create_app(store=seeded_store, catalog=LessonCatalog(DEMO_LESSON_PLANS), gateway=gateway)
    with TestClient(app) as c:
        yield c
