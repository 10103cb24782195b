"""
AI report result schemas.

Report payloads come back from a language model, so every field has a
default: a partial payload still validates into a complete report.
Both snake_case and camelCase keys are accepted.
"""
from enum import Enum
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ReportKind(str, Enum):
    """The three AI report variants."""
    STRATEGY = "strategy"
    GROWTH = "growth"
    CONSULTING = "consulting"


class _ReportModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TitledText(_ReportModel):
    title: str = ""
    details: str = ""


# ----------------------------
# Strategy
# ----------------------------
class CoreConcept(_ReportModel):
    title: str = "Analysis unavailable"
    description: str = "The channel data could not be analyzed."


class DetailedPlan(_ReportModel):
    content_direction: TitledText = Field(default_factory=TitledText)
    upload_schedule: TitledText = Field(default_factory=TitledText)
    community_engagement: TitledText = Field(default_factory=TitledText)
    keyword_strategy: TitledText = Field(default_factory=TitledText)


class StrategyPhase(_ReportModel):
    phase_title: str = ""
    focus: str = ""
    action_items: List[str] = Field(default_factory=list)


class InitialStrategy(_ReportModel):
    title: str = ""
    phases: List[StrategyPhase] = Field(default_factory=list)


class SuggestedTitles(_ReportModel):
    title: str = ""
    titles: List[str] = Field(default_factory=list)


class Kpi(_ReportModel):
    kpi_title: str = ""
    description: str = ""


class KpiSettings(_ReportModel):
    title: str = ""
    kpis: List[Kpi] = Field(default_factory=list)


class Risk(_ReportModel):
    risk_title: str = ""
    strategy: str = ""


class RiskManagement(_ReportModel):
    title: str = ""
    risks: List[Risk] = Field(default_factory=list)


class RevenueStream(_ReportModel):
    revenue_title: str = ""
    description: str = ""


class RevenueModel(_ReportModel):
    title: str = ""
    streams: List[RevenueStream] = Field(default_factory=list)


class StrategyReport(_ReportModel):
    core_concept: CoreConcept = Field(default_factory=CoreConcept)
    detailed_plan: DetailedPlan = Field(default_factory=DetailedPlan)
    initial_strategy: InitialStrategy = Field(default_factory=InitialStrategy)
    suggested_titles: SuggestedTitles = Field(default_factory=SuggestedTitles)
    kpi_settings: KpiSettings = Field(default_factory=KpiSettings)
    risk_management: RiskManagement = Field(default_factory=RiskManagement)
    revenue_model: RevenueModel = Field(default_factory=RevenueModel)


# ----------------------------
# Growth analysis
# ----------------------------
class KeyVideo(_ReportModel):
    title: str = ""
    reason: str = ""


class QuantitativeAnalysis(_ReportModel):
    title: str = ""
    avg_views: str = ""
    like_view_ratio: str = ""
    comment_view_ratio: str = ""


class ContentStrategyAnalysis(_ReportModel):
    title: str = ""
    avg_video_duration: str = ""
    upload_frequency: str = ""
    title_thumbnail_strategy: str = ""


class GrowthPhase(_ReportModel):
    phase_title: str = ""
    period: str = ""
    performance_summary: str = ""
    strategy_analysis: str = ""
    key_videos: List[KeyVideo] = Field(default_factory=list)
    quantitative_analysis: QuantitativeAnalysis = Field(default_factory=QuantitativeAnalysis)
    content_strategy_analysis: ContentStrategyAnalysis = Field(
        default_factory=ContentStrategyAnalysis
    )


class GrowthReport(_ReportModel):
    title: str = "Analysis unavailable"
    overall_summary: str = "The channel data could not be loaded."
    phases: List[GrowthPhase] = Field(default_factory=list)


# ----------------------------
# Consulting
# ----------------------------
class Diagnosis(_ReportModel):
    title: str = "Diagnosis unavailable"
    summary: str = "The channel data could not be loaded."


class AreaAnalysis(_ReportModel):
    area: str = ""
    problem: str = ""
    solution: str = ""


class PlanHorizon(_ReportModel):
    title: str = ""
    period: str = ""
    steps: List[str] = Field(default_factory=list)


class ActionPlan(_ReportModel):
    short_term: PlanHorizon = Field(default_factory=PlanHorizon)
    long_term: PlanHorizon = Field(default_factory=PlanHorizon)


class ConsultingReport(_ReportModel):
    overall_diagnosis: Diagnosis = Field(default_factory=Diagnosis)
    detailed_analysis: List[AreaAnalysis] = Field(default_factory=list)
    action_plan: ActionPlan = Field(default_factory=ActionPlan)


Report = Union[StrategyReport, GrowthReport, ConsultingReport]

REPORT_MODELS = {
    ReportKind.STRATEGY: StrategyReport,
    ReportKind.GROWTH: GrowthReport,
    ReportKind.CONSULTING: ConsultingReport,
}


def parse_report(kind: ReportKind, payload: dict) -> Report:
    """Validate a raw provider payload into the report model for ``kind``."""
    return REPORT_MODELS[kind].model_validate(payload or {})
