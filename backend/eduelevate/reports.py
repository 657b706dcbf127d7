"""
Coaching report schemas.

Every reply from the model is validated into exactly one of these variants.
The ``kind`` field is the discriminator, so a ``CoachingResult`` can be
matched on without inspecting payload keys. ``AnalysisFailed`` is the single
variant for anything that went wrong between request and validated report.
"""

from __future__ import annotations
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ReportKind(str, Enum):
    LESSON_CRITIQUE = "lesson_critique"
    LESSON_REWRITE = "lesson_rewrite"
    OBSERVATION = "observation"
    GROWTH_TREND = "growth_trend"
    EXIT_TICKETS = "exit_tickets"
    REFLECTION = "reflection"


class _Report(BaseModel):
    # Models often add chatter keys; keep only what the schema names
    model_config = ConfigDict(extra="ignore")


# ============================================================================
# SHARED PIECES
# ============================================================================

class BridgePlan(_Report):
    """Proficient+1 next step: one Growth Ladder rung and two concrete moves."""
    focus_skill: str
    two_moves: List[str] = Field(default_factory=list)
    easier_version: str = ""
    success_signal: str = ""


class TtessScore(_Report):
    dimension: str
    score: float
    evidence: str = ""


class Misconception(_Report):
    issue: str
    cause: str = ""
    correction: str = ""


class LessonPhase(_Report):
    name: str
    teacher_actions: str = ""
    student_actions: str = ""
    engagement_strategy: Optional[str] = None
    quick_check: Optional[str] = None


# ============================================================================
# LESSON CRITIQUE
# ============================================================================

class LessonCritique(_Report):
    kind: Literal["lesson_critique"] = "lesson_critique"
    rating: str = "Ready"
    strengths: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    ladder_rung: Optional[str] = None
    ttess_alignment: Optional[List[TtessScore]] = None


# ============================================================================
# STRUCTURED (DISTINGUISHED) LESSON PLAN
# ============================================================================

class LessonOverview(_Report):
    grade: str = ""
    subject: str = ""
    standards: str = ""
    learning_objective: str = ""
    success_criteria: str = ""
    vocabulary: str = ""
    talk_balance_target: str = ""


class Differentiation(_Report):
    below: str = ""
    on: str = ""
    above: str = ""


class ClassroomCulture(_Report):
    pax_kernel: str = ""
    attention_signal: str = ""


class ExitTicketDesign(_Report):
    skill: str = ""
    mastery_rule: str = ""


class StructuredLessonPlan(_Report):
    kind: Literal["lesson_rewrite"] = "lesson_rewrite"
    overview: LessonOverview
    we_will: str
    i_will: str
    misconceptions: List[Misconception] = Field(default_factory=list)
    phases: List[LessonPhase] = Field(default_factory=list)
    differentiation: Differentiation = Field(default_factory=Differentiation)
    classroom_culture: ClassroomCulture = Field(default_factory=ClassroomCulture)
    bridge_plan: BridgePlan
    exit_ticket_design: ExitTicketDesign = Field(default_factory=ExitTicketDesign)


# ============================================================================
# OBSERVATION ANALYSIS
# ============================================================================

class AlignmentSummary(_Report):
    level: str = ""
    strength: str = ""
    growth: str = ""


class TalkEvidence(_Report):
    quote: str
    type: Literal["teacher", "student"]
    timestamp: Optional[str] = None


class TalkBalance(_Report):
    teacher_percentage: float = Field(ge=0, le=100)
    student_percentage: float = Field(ge=0, le=100)
    evidence: List[TalkEvidence] = Field(default_factory=list)
    missed_opportunity: str = ""
    action_step: str = ""


class MisconceptionReview(_Report):
    appeared: str
    response: str = ""
    resolved: bool = False
    suggestion: str = ""


class FlowReview(_Report):
    phase: str
    what_matched: str = ""
    what_was_missing: str = ""
    adjustment: str = ""


class NextAdjustments(_Report):
    keep: List[str] = Field(default_factory=list)
    adjust: List[str] = Field(default_factory=list)
    add: List[str] = Field(default_factory=list)


class ObservationAnalysis(_Report):
    kind: Literal["observation"] = "observation"
    alignment_summary: AlignmentSummary = Field(default_factory=AlignmentSummary)
    talk_balance: TalkBalance
    misconception_review: List[MisconceptionReview] = Field(default_factory=list)
    flow_analysis: List[FlowReview] = Field(default_factory=list)
    bridge_plan: BridgePlan
    ttess_alignment: Optional[List[TtessScore]] = None
    next_adjustments: NextAdjustments = Field(default_factory=NextAdjustments)


# ============================================================================
# GROWTH TREND
# ============================================================================

class MetricSnapshot(_Report):
    metric: str
    value: str
    trend: Literal["up", "down", "stable"] = "stable"


class GrowthTrendReport(_Report):
    kind: Literal["growth_trend"] = "growth_trend"
    overall_trend: str
    metric_snapshots: List[MetricSnapshot] = Field(default_factory=list)
    growth_insights: List[str] = Field(default_factory=list)
    ladder_progress: str = ""


# ============================================================================
# EXIT TICKETS
# ============================================================================

class TicketSnapshot(_Report):
    skill: str = ""
    total_students: int = 0
    mastery_criteria: str = ""


class PerformanceGroup(_Report):
    count: int = 0
    names: List[str] = Field(default_factory=list)


class PerformanceBands(_Report):
    got_it: PerformanceGroup = Field(default_factory=PerformanceGroup)
    almost: PerformanceGroup = Field(default_factory=PerformanceGroup)
    not_yet: PerformanceGroup = Field(default_factory=PerformanceGroup)


class MisconceptionMapping(_Report):
    primary: str = ""
    secondary: str = ""
    reteach_strategy: str = ""


class NextDayPlan(_Report):
    reteach_strategy: str = ""
    reteach_example: str = ""
    reinforce_strategy: str = ""
    extension_task: str = ""


class StudentTicketResult(_Report):
    name: str
    score: float
    suggested_tier: int = Field(default=1, ge=1, le=3)
    observation: str = ""


class ExitTicketAnalysis(_Report):
    kind: Literal["exit_tickets"] = "exit_tickets"
    snapshot: TicketSnapshot = Field(default_factory=TicketSnapshot)
    performance_bands: PerformanceBands = Field(default_factory=PerformanceBands)
    misconception_mapping: MisconceptionMapping = Field(default_factory=MisconceptionMapping)
    bridge_plan: BridgePlan
    next_day_plan: NextDayPlan = Field(default_factory=NextDayPlan)
    student_data: List[StudentTicketResult] = Field(default_factory=list)


# ============================================================================
# INSTRUCTIONAL REFLECTION
# ============================================================================

class LessonInfo(_Report):
    teacher: str = ""
    date: str = ""
    subject: str = ""


class ImplementationSnapshot(_Report):
    phase: str
    strengths: str = ""
    growth_areas: str = ""


class StudentResults(_Report):
    mastery_rate: str = ""
    bands: str = ""


class InstructionalReflectionReport(_Report):
    kind: Literal["reflection"] = "reflection"
    lesson_info: LessonInfo = Field(default_factory=LessonInfo)
    implementation_snapshot: List[ImplementationSnapshot] = Field(default_factory=list)
    student_results: StudentResults = Field(default_factory=StudentResults)
    bridge_plan_history: List[str] = Field(default_factory=list)
    growth_mindset_statement: str
    action_steps: List[str] = Field(default_factory=list)


# ============================================================================
# FAILURE AND THE CLOSED UNION
# ============================================================================

class AnalysisFailed(BaseModel):
    kind: Literal["analysis_failed"] = "analysis_failed"
    requested: ReportKind


CoachingReport = Union[
    LessonCritique,
    StructuredLessonPlan,
    ObservationAnalysis,
    GrowthTrendReport,
    ExitTicketAnalysis,
    InstructionalReflectionReport,
]

CoachingResult = Annotated[
    Union[
        LessonCritique,
        StructuredLessonPlan,
        ObservationAnalysis,
        GrowthTrendReport,
        ExitTicketAnalysis,
        InstructionalReflectionReport,
        AnalysisFailed,
    ],
    Field(discriminator="kind"),
]

REPORT_TYPES = {
    ReportKind.LESSON_CRITIQUE: LessonCritique,
    ReportKind.LESSON_REWRITE: StructuredLessonPlan,
    ReportKind.OBSERVATION: ObservationAnalysis,
    ReportKind.GROWTH_TREND: GrowthTrendReport,
    ReportKind.EXIT_TICKETS: ExitTicketAnalysis,
    ReportKind.REFLECTION: InstructionalReflectionReport,
}
