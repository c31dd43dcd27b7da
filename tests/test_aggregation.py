"""
Tests for per-request aggregation: step order, context feeding, totals, long-context surcharge.
"""

from dataclasses import replace

import pytest

from agentcost.catalog import EmbeddingModel, Model, WebSearchTool
from agentcost.estimation import (
    LONG_CONTEXT_THRESHOLD_TOKENS,
    RequestCostInput,
    calc_request_cost,
)


def _create_main_model(provider_name="OpenAI") -> Model:
    return Model(1, 1, provider_name, "Main", "standard", 2.0, 8.0)


def _create_aux_model() -> Model:
    return Model(2, 1, "OpenAI", "Aux", "lightweight", 0.1, 0.4)


def _create_base_input(**overrides) -> RequestCostInput:
    """Helper: all options off, Japanese, 2000-char system prompt."""
    data = dict(
        main_model=_create_main_model(),
        language="ja",
        system_prompt_chars=2000,
        max_input_chars=1000,
        max_output_chars=1500,
    )
    data.update(overrides)
    return RequestCostInput(**data)


def _create_full_input(**overrides) -> RequestCostInput:
    """Helper: every optional stage enabled with models available."""
    aux = _create_aux_model()
    data = dict(
        topic_classification=True,
        classification_fallback_rate=20,
        classification_model=aux,
        orchestrator=True,
        orchestrator_model=aux,
        sub_agent_max_calls=2,
        sub_agent_model=_create_main_model(),
        semantic_search_enabled=True,
        search_chunk_count=5,
        search_chunk_size=500,
        embedding_model=EmbeddingModel(1, 1, "OpenAI", "Emb", 0.02),
        conversation_history=True,
        max_history_turns=10,
        history_compression=True,
        compression_frequency=5,
        compression_model=aux,
        web_search=True,
        web_search_tool=WebSearchTool(1, 1, "OpenAI", "Search", 10.0),
        web_search_calls_per_request=1,
        web_search_result_count=3,
    )
    data.update(overrides)
    return _create_base_input(**data)


def test_all_options_off():
    """Only the main agent contributes."""
    result = calc_request_cost(_create_base_input())
    assert [step.name for step in result.steps] == ["Main agent"]
    assert result.total_input_tokens == 4500
    assert result.total_output_tokens == 2250
    assert result.cost_per_request == pytest.approx(0.027)
    assert result.long_context_surcharge is False


def test_step_order_with_all_options():
    """Steps follow pipeline order."""
    result = calc_request_cost(_create_full_input())
    assert [step.name for step in result.steps] == [
        "Topic classification",
        "Orchestrator",
        "Semantic search",
        "Web search",
        "Conversation history",
        "Main agent",
        "Sub-agent",
        "History compression",
    ]


def test_main_agent_receives_context_tokens():
    """System prompt + input + history + retrieved chunks + web results."""
    result = calc_request_cost(_create_full_input())
    main = next(step for step in result.steps if step.name == "Main agent")
    assert main.input_tokens == 3000 + 1500 + 18750 + 3750 + 9000


def test_totals_equal_sum_of_steps():
    result = calc_request_cost(_create_full_input())
    assert result.cost_per_request == pytest.approx(sum(s.cost_usd for s in result.steps))
    assert result.total_input_tokens == sum(s.input_tokens for s in result.steps)
    assert result.total_output_tokens == sum(s.output_tokens for s in result.steps)


def test_web_search_disabled_not_listed():
    """A configured tool is ignored while web search is off."""
    result = calc_request_cost(_create_full_input(web_search=False))
    names = [step.name for step in result.steps]
    assert "Web search" not in names
    main = next(step for step in result.steps if step.name == "Main agent")
    assert main.input_tokens == 3000 + 1500 + 18750 + 3750


def test_semantic_search_listed_when_enabled_without_cost():
    """Semantic search is listed whenever enabled, even at zero cost."""
    result = calc_request_cost(
        _create_base_input(semantic_search_enabled=True, search_chunk_count=5, search_chunk_size=500)
    )
    names = [step.name for step in result.steps]
    assert names == ["Semantic search", "Main agent"]
    assert result.steps[0].cost_usd == 0.0


def test_enabled_stage_without_model_is_omitted():
    """An enabled orchestrator with no model contributes nothing and is not listed."""
    result = calc_request_cost(_create_base_input(orchestrator=True, orchestrator_model=None))
    assert [step.name for step in result.steps] == ["Main agent"]
    assert result.cost_per_request == pytest.approx(0.027)


def test_option_increases_cost():
    """Enabling an option never lowers the per-request cost."""
    base = calc_request_cost(_create_base_input())
    with_orchestrator = calc_request_cost(
        _create_base_input(orchestrator=True, orchestrator_model=_create_aux_model())
    )
    assert with_orchestrator.cost_per_request > base.cost_per_request


def _create_long_context_input(provider_name: str) -> RequestCostInput:
    """Helper: 250K system prompt tokens in English."""
    return _create_base_input(
        main_model=_create_main_model(provider_name),
        language="en",
        system_prompt_chars=1_000_000,
        max_input_chars=1000,
        max_output_chars=1000,
    )


def test_long_context_surcharge_anthropic():
    """Anthropic main agent cost doubles above 200K input tokens."""
    surcharged = calc_request_cost(_create_long_context_input("Anthropic"))
    plain = calc_request_cost(_create_long_context_input("OpenAI"))
    assert surcharged.long_context_surcharge is True
    assert plain.long_context_surcharge is False
    assert surcharged.cost_per_request == pytest.approx(2 * plain.cost_per_request)


def test_long_context_surcharge_google():
    result = calc_request_cost(_create_long_context_input("Google"))
    assert result.long_context_surcharge is True


def test_long_context_surcharge_only_main_agent():
    """Other stages are not doubled."""
    aux = _create_aux_model()
    anthropic = calc_request_cost(
        replace(_create_long_context_input("Anthropic"), orchestrator=True, orchestrator_model=aux)
    )
    openai = calc_request_cost(
        replace(_create_long_context_input("OpenAI"), orchestrator=True, orchestrator_model=aux)
    )
    orch_a = next(s for s in anthropic.steps if s.name == "Orchestrator")
    orch_o = next(s for s in openai.steps if s.name == "Orchestrator")
    assert orch_a.cost_usd == pytest.approx(orch_o.cost_usd)


def test_long_context_threshold_is_exclusive():
    """Exactly 200K input tokens is not surcharged."""
    request = _create_base_input(
        main_model=_create_main_model("Anthropic"),
        language="en",
        system_prompt_chars=LONG_CONTEXT_THRESHOLD_TOKENS * 4,
        max_input_chars=0,
        max_output_chars=0,
    )
    result = calc_request_cost(request)
    assert result.steps[0].input_tokens == LONG_CONTEXT_THRESHOLD_TOKENS
    assert result.long_context_surcharge is False


def test_more_history_turns_cost_more():
    """With history enabled, more carried turns strictly raise the cost."""
    costs = [
        calc_request_cost(
            _create_base_input(conversation_history=True, max_history_turns=turns)
        ).cost_per_request
        for turns in (2, 4, 8)
    ]
    assert costs[0] < costs[1] < costs[2]


def test_prompt_caching_never_costs_more():
    cached_model = replace(_create_main_model(), cache_read_price=0.5)
    plain = calc_request_cost(_create_base_input(main_model=cached_model))
    cached = calc_request_cost(_create_base_input(main_model=cached_model, prompt_caching=True))
    assert cached.cost_per_request <= plain.cost_per_request
