"""
Cost result serializer: deterministic JSON-serializable dicts for CostResult and projections.
"""

from __future__ import annotations

from agentcost.estimation.data_model import (
    AnnualProjection,
    Assumptions,
    CostResult,
    StepCost,
)

RESULT_SCHEMA_VERSION = "1.0"


def step_cost_to_dict(step: StepCost) -> dict:
    """Convert StepCost to JSON-serializable dict."""
    return {
        "name": step.name,
        "model_name": step.model_name,
        "description": step.description,
        "input_tokens": step.input_tokens,
        "output_tokens": step.output_tokens,
        "cost_usd": step.cost_usd,
    }


def assumptions_to_dict(assumptions: Assumptions) -> dict:
    return {
        "model_name": assumptions.model_name,
        "auxiliary_model_name": assumptions.auxiliary_model_name,
        "provider_name": assumptions.provider_name,
        "daily_requests": assumptions.daily_requests,
        "monthly_working_days": assumptions.monthly_working_days,
        "max_input_chars": assumptions.max_input_chars,
        "max_output_chars": assumptions.max_output_chars,
        "language": assumptions.language,
        "system_prompt_chars": assumptions.system_prompt_chars,
        "avg_turns_per_session": assumptions.avg_turns_per_session,
        "safety_margin_percent": assumptions.safety_margin_percent,
        "currency": assumptions.currency,
        "exchange_rate": assumptions.exchange_rate,
        "enabled_options": list(assumptions.enabled_options),
        "option_details": dict(sorted(assumptions.option_details.items())),
        "stage_models": dict(sorted(assumptions.stage_models.items())),
        "embedding_model_name": assumptions.embedding_model_name,
        "web_search_tool_name": assumptions.web_search_tool_name,
    }


def cost_result_to_dict(result: CostResult) -> dict:
    """
    Return a JSON-serializable dict with deterministic ordering.

    steps keep pipeline order (the display order); all other mappings are
    emitted with sorted keys.
    """
    return {
        "schema_version": RESULT_SCHEMA_VERSION,
        "cost_per_request": result.cost_per_request,
        "steps": [step_cost_to_dict(step) for step in result.steps],
        "daily_cost_usd": result.daily_cost_usd,
        "monthly_cost_usd": result.monthly_cost_usd,
        "monthly_cost_before_margin": result.monthly_cost_before_margin,
        "monthly_cost_jpy": result.monthly_cost_jpy,
        "annual_cost_usd": result.annual_cost_usd,
        "annual_cost_jpy": result.annual_cost_jpy,
        "total_input_tokens": result.total_input_tokens,
        "total_output_tokens": result.total_output_tokens,
        "safety_margin_rate": result.safety_margin_rate,
        "exchange_rate": result.exchange_rate,
        "long_context_surcharge": result.long_context_surcharge,
        "assumptions": assumptions_to_dict(result.assumptions),
        "reembedding": step_cost_to_dict(result.reembedding) if result.reembedding else None,
    }


def annual_projection_to_dict(projection: AnnualProjection) -> dict:
    """Convert AnnualProjection to JSON-serializable dict (months in order 1-12)."""
    return {
        "projections": [
            {
                "month": month.month,
                "multiplier": month.multiplier,
                "monthly_cost_usd": month.monthly_cost_usd,
                "monthly_cost_jpy": month.monthly_cost_jpy,
                "cumulative_cost_usd": month.cumulative_cost_usd,
                "cumulative_cost_jpy": month.cumulative_cost_jpy,
            }
            for month in projection.projections
        ],
        "total_annual_cost_usd": projection.total_annual_cost_usd,
        "total_annual_cost_jpy": projection.total_annual_cost_jpy,
    }
