"""Tests for CostResult and growth projection serialization."""

import json

from agentcost.catalog import load_catalog
from agentcost.estimation import (
    RESULT_SCHEMA_VERSION,
    GrowthScenario,
    annual_projection_to_dict,
    calc_growth_projection,
    cost_result_to_dict,
)
from agentcost.modes import CostCalculator, DetailedModeInput


def _create_result():
    catalog = load_catalog(
        {
            "providers": [
                {
                    "name": "OpenAI",
                    "models": [
                        {"name": "GPT-4.1", "input_price": 2.0, "output_price": 8.0},
                        {"name": "GPT-4.1 nano", "category": "lightweight", "input_price": 0.1, "output_price": 0.4},
                    ],
                }
            ]
        }
    )
    detailed = DetailedModeInput(
        main_model_id=1,
        daily_requests=100,
        monthly_working_days=20,
        max_input_chars=1000,
        max_output_chars=1500,
        system_prompt_chars=2000,
        orchestrator=True,
        conversation_history=True,
        max_history_turns=4,
    )
    return CostCalculator(catalog).calculate(detailed)


def test_cost_result_to_dict_structure():
    data = cost_result_to_dict(_create_result())
    assert data["schema_version"] == RESULT_SCHEMA_VERSION
    assert [step["name"] for step in data["steps"]] == [
        "Orchestrator",
        "Conversation history",
        "Main agent",
    ]
    assert data["assumptions"]["model_name"] == "GPT-4.1"
    assert data["assumptions"]["enabled_options"] == ["Orchestrator", "Conversation history"]
    assert data["assumptions"]["stage_models"] == {"Orchestrator": "GPT-4.1 nano"}
    assert data["assumptions"]["embedding_model_name"] is None
    assert data["reembedding"]["cost_usd"] == 0.0
    assert data["long_context_surcharge"] is False


def test_option_details_sorted():
    data = cost_result_to_dict(_create_result())
    keys = list(data["assumptions"]["option_details"])
    assert keys == sorted(keys)


def test_cost_result_json_deterministic():
    """Same result serializes to the same JSON."""
    first = json.dumps(cost_result_to_dict(_create_result()), sort_keys=True)
    second = json.dumps(cost_result_to_dict(_create_result()), sort_keys=True)
    assert first == second


def test_annual_projection_to_dict():
    projection = calc_growth_projection(10.0, 150.0, GrowthScenario("monthlyRate", monthly_growth_rate=5))
    data = annual_projection_to_dict(projection)
    assert [m["month"] for m in data["projections"]] == list(range(1, 13))
    assert data["total_annual_cost_usd"] == projection.total_annual_cost_usd
    json.dumps(data)
