"""Cost estimation: token conversion, stage costing, request aggregation, extrapolation and growth."""

from agentcost.estimation.aggregation import (
    LONG_CONTEXT_SURCHARGE_PROVIDERS,
    LONG_CONTEXT_THRESHOLD_TOKENS,
    calc_request_cost,
)
from agentcost.estimation.data_model import (
    AnnualProjection,
    Assumptions,
    CostResult,
    GrowthScenario,
    Language,
    MonthlyCost,
    MonthlyProjection,
    RequestCost,
    RequestCostInput,
    StepCost,
)
from agentcost.estimation.extrapolation import calc_monthly_cost
from agentcost.estimation.growth import GROWTH_PRESET_MULTIPLIERS, calc_growth_projection
from agentcost.estimation.serializer import (
    RESULT_SCHEMA_VERSION,
    annual_projection_to_dict,
    cost_result_to_dict,
)
from agentcost.estimation.stages import (
    calc_compression_cost,
    calc_conversation_history_cost,
    calc_main_agent_cost,
    calc_orchestrator_cost,
    calc_reembedding_cost,
    calc_semantic_search_cost,
    calc_sub_agent_cost,
    calc_topic_classification_cost,
    calc_web_search_cost,
)
from agentcost.estimation.system_prompt import (
    ESTIMATION_BASE_CHARS,
    ESTIMATION_FACTORS,
    ESTIMATION_MAPPINGS,
    estimate_system_prompt_chars,
)
from agentcost.estimation.tokens import TOKEN_CONVERSION_RATES, token_cost, tokens_from_chars

__all__ = [
    "AnnualProjection",
    "Assumptions",
    "CostResult",
    "ESTIMATION_BASE_CHARS",
    "ESTIMATION_FACTORS",
    "ESTIMATION_MAPPINGS",
    "GROWTH_PRESET_MULTIPLIERS",
    "GrowthScenario",
    "LONG_CONTEXT_SURCHARGE_PROVIDERS",
    "LONG_CONTEXT_THRESHOLD_TOKENS",
    "Language",
    "MonthlyCost",
    "MonthlyProjection",
    "RESULT_SCHEMA_VERSION",
    "RequestCost",
    "RequestCostInput",
    "StepCost",
    "TOKEN_CONVERSION_RATES",
    "annual_projection_to_dict",
    "calc_compression_cost",
    "calc_conversation_history_cost",
    "calc_growth_projection",
    "calc_main_agent_cost",
    "calc_monthly_cost",
    "calc_orchestrator_cost",
    "calc_reembedding_cost",
    "calc_request_cost",
    "calc_semantic_search_cost",
    "calc_sub_agent_cost",
    "calc_topic_classification_cost",
    "calc_web_search_cost",
    "cost_result_to_dict",
    "estimate_system_prompt_chars",
    "token_cost",
    "tokens_from_chars",
]
