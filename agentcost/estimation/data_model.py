"""
Cost estimation data model: request input, step costs, request/monthly/full results,
growth scenarios and projections.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal

from agentcost.catalog.entities import EmbeddingModel, Model, WebSearchTool

Language = Literal["ja", "en", "mixed"]
Currency = Literal["USD", "JPY"]
GrowthMode = Literal["multiplier", "monthlyRate"]
EstimationLevel = Literal["none", "low", "medium", "high"]

LANGUAGES: tuple[str, ...] = ("ja", "en", "mixed")
CURRENCIES: tuple[str, ...] = ("USD", "JPY")
GROWTH_MODES: tuple[str, ...] = ("multiplier", "monthlyRate")
ESTIMATION_LEVELS: tuple[str, ...] = ("none", "low", "medium", "high")


@dataclass(frozen=True)
class RequestCostInput:
    """
    Flat per-request configuration with resolved model references.

    Optional stages default to disabled; any optional model left as None
    collapses its stage to zero cost instead of failing the calculation.
    """

    main_model: Model
    language: Language
    system_prompt_chars: int
    max_input_chars: int
    max_output_chars: int
    avg_turns_per_session: int = 1

    # Multi-agent
    topic_classification: bool = False
    classification_fallback_rate: float = 0.0  # 0-100 (%)
    classification_model: Model | None = None
    orchestrator: bool = False
    orchestrator_model: Model | None = None
    sub_agent_max_calls: int = 0
    sub_agent_model: Model | None = None

    # Semantic search
    semantic_search_enabled: bool = False
    search_chunk_count: int = 0
    search_chunk_size: int = 0  # chars
    embedding_model: EmbeddingModel | None = None
    reranking_enabled: bool = False
    reranking_model: Model | None = None
    reembedding_monthly_chars: int = 0

    # Conversation history
    conversation_history: bool = False
    max_history_turns: int = 0
    history_compression: bool = False
    compression_frequency: int = 0  # compress every N turns
    compression_model: Model | None = None

    # Web search
    web_search: bool = False
    web_search_tool: WebSearchTool | None = None
    web_search_calls_per_request: int = 0
    web_search_result_count: int = 0
    web_search_summarization: bool = False
    summarization_model: Model | None = None

    prompt_caching: bool = False


@dataclass(frozen=True)
class StepCost:
    """
    Cost of one pipeline stage for a single request.

    Invariant: cost_usd >= 0 and token counts >= 0
    """

    name: str
    model_name: str
    description: str
    input_tokens: int
    output_tokens: int
    cost_usd: float

    def __post_init__(self) -> None:
        """Validate invariant: non-negative cost and tokens."""
        if self.cost_usd < 0:
            raise ValueError(f"StepCost invariant violated: cost_usd ({self.cost_usd}) >= 0 for {self.name}")
        if self.input_tokens < 0 or self.output_tokens < 0:
            raise ValueError(
                f"StepCost invariant violated: tokens must be non-negative for {self.name} "
                f"(input={self.input_tokens}, output={self.output_tokens})"
            )


@dataclass(frozen=True)
class RequestCost:
    """Aggregated per-request cost with itemized steps in pipeline order."""

    cost_per_request: float
    steps: tuple[StepCost, ...]
    total_input_tokens: int
    total_output_tokens: int
    long_context_surcharge: bool


@dataclass(frozen=True)
class MonthlyCost:
    """Daily, monthly and annual extrapolation of a per-request cost."""

    daily_cost_usd: float
    monthly_cost_before_margin: float
    monthly_cost_usd: float  # Includes safety margin
    monthly_cost_jpy: float
    annual_cost_usd: float
    annual_cost_jpy: float


@dataclass(frozen=True)
class Assumptions:
    """
    Restatement of the calculation input for display and duplicate detection.

    Two results with equal Assumptions were computed from the same inputs:
    every cost-relevant flag is carried, and stage_models names the resolved
    model of each helper stage that runs.
    """

    model_name: str
    auxiliary_model_name: str | None
    provider_name: str
    daily_requests: int
    monthly_working_days: int
    max_input_chars: int
    max_output_chars: int
    language: Language
    system_prompt_chars: int
    avg_turns_per_session: int
    safety_margin_percent: float
    currency: Currency
    exchange_rate: float
    enabled_options: tuple[str, ...]
    option_details: Mapping[str, str] = field(default_factory=dict)
    stage_models: Mapping[str, str] = field(default_factory=dict)  # step name -> model name
    embedding_model_name: str | None = None
    web_search_tool_name: str | None = None


@dataclass(frozen=True)
class CostResult:
    """
    Full result of one calculation: per-request, daily, monthly and annual cost.

    reembedding is a monthly cost reported alongside, not included in
    monthly_cost_usd.
    """

    cost_per_request: float
    steps: tuple[StepCost, ...]
    daily_cost_usd: float
    monthly_cost_usd: float
    monthly_cost_before_margin: float
    monthly_cost_jpy: float
    annual_cost_usd: float
    annual_cost_jpy: float
    total_input_tokens: int
    total_output_tokens: int
    safety_margin_rate: float
    exchange_rate: float
    long_context_surcharge: bool
    assumptions: Assumptions
    reembedding: StepCost | None = None


@dataclass(frozen=True)
class GrowthScenario:
    """
    12-month growth model.

    monthly_multipliers is used iff mode == "multiplier";
    monthly_growth_rate (percent per month) iff mode == "monthlyRate".
    """

    mode: GrowthMode
    monthly_multipliers: tuple[float, ...] = ()
    monthly_growth_rate: float = 0.0


@dataclass(frozen=True)
class MonthlyProjection:
    month: int  # 1-12
    multiplier: float
    monthly_cost_usd: float
    monthly_cost_jpy: float
    cumulative_cost_usd: float
    cumulative_cost_jpy: float


@dataclass(frozen=True)
class AnnualProjection:
    projections: tuple[MonthlyProjection, ...]
    total_annual_cost_usd: float
    total_annual_cost_jpy: float
