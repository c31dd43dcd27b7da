"""
Tests for comparison entries, labels, duplicate detection and the markdown report.
"""

from dataclasses import replace

import pytest

from agentcost.catalog import load_catalog
from agentcost.comparison import (
    ComparisonList,
    build_comparison_label,
    generate_comparison_markdown,
)
from agentcost.modes import CostCalculator, DetailedModeInput


def _create_calculator() -> CostCalculator:
    catalog = load_catalog(
        {
            "providers": [
                {
                    "name": "OpenAI",
                    "models": [
                        {"id": 1, "name": "GPT-4.1", "input_price": 2.0, "output_price": 8.0},
                        {"id": 2, "name": "GPT-4.1 nano", "category": "lightweight", "input_price": 0.1, "output_price": 0.4},
                    ],
                    "embedding_models": [{"id": 1, "name": "text-embedding-3-small", "input_price": 0.02}],
                },
                {
                    "name": "Anthropic",
                    "models": [{"id": 3, "name": "Claude Sonnet 4.5", "input_price": 3.0, "output_price": 15.0}],
                },
            ]
        }
    )
    return CostCalculator(catalog)


def _create_result(**overrides):
    data = dict(
        main_model_id=1,
        daily_requests=100,
        monthly_working_days=20,
        max_input_chars=1000,
        max_output_chars=1500,
        system_prompt_chars=2000,
        safety_margin=20.0,
    )
    data.update(overrides)
    return _create_calculator().calculate(DetailedModeInput(**data))


def test_label_base_configuration():
    label = build_comparison_label(_create_result().assumptions)
    assert label == "GPT-4.1 - Base configuration (100req, in 1,000/out 1,500 chars)"


def test_label_with_options():
    result = _create_result(orchestrator=True, prompt_caching=True, daily_requests=2500)
    label = build_comparison_label(result.assumptions)
    assert label == "GPT-4.1 - Orchestrator+Prompt caching (2500req, in 1,000/out 1,500 chars)"


def test_label_differs_with_conditions():
    a = build_comparison_label(_create_result().assumptions)
    b = build_comparison_label(_create_result(max_input_chars=2000).assumptions)
    assert a != b


def test_comparison_list_add_and_remove():
    comparisons = ComparisonList()
    first = comparisons.add(_create_result())
    second = comparisons.add(_create_result(main_model_id=3), label="Sonnet plan")
    assert len(comparisons) == 2
    assert first.id != second.id
    assert first.label.startswith("GPT-4.1 - ")
    assert second.label == "Sonnet plan"
    assert first.created_at

    comparisons.remove(first.id)
    assert [e.label for e in comparisons.entries] == ["Sonnet plan"]

    comparisons.remove("unknown-id")
    assert len(comparisons) == 1

    comparisons.clear()
    assert comparisons.entries == ()


def test_comparison_list_duplicates():
    comparisons = ComparisonList()
    result = _create_result()
    entry = comparisons.add(result)
    assert comparisons.contains_label(entry.label)
    assert comparisons.contains_assumptions(_create_result().assumptions)
    assert not comparisons.contains_assumptions(_create_result(daily_requests=101).assumptions)


def test_entries_are_snapshot():
    comparisons = ComparisonList()
    comparisons.add(_create_result())
    entries = comparisons.entries
    comparisons.add(_create_result(daily_requests=200))
    assert len(entries) == 1


def test_markdown_single_entry():
    comparisons = ComparisonList()
    comparisons.add(_create_result(), label="Baseline")
    markdown = generate_comparison_markdown(comparisons.entries)
    assert markdown.startswith("# LLM running cost comparison")
    assert "## Overview" not in markdown
    assert "## Plan 1: Baseline" in markdown
    assert "### Assumptions" in markdown
    assert "- Main model: GPT-4.1 (OpenAI)" in markdown
    assert "- Auxiliary model: GPT-4.1 nano" in markdown
    assert "- Monthly cost: $64.80 (incl. +20% safety margin)" in markdown
    assert "- Total per request: $0.027000" in markdown
    assert "| Main agent |" in markdown


def test_markdown_overview_for_two_entries():
    comparisons = ComparisonList()
    comparisons.add(_create_result(), label="A")
    comparisons.add(_create_result(main_model_id=3), label="B")
    markdown = generate_comparison_markdown(comparisons.entries)
    assert "## Overview" in markdown
    assert "| Item | Plan 1 | Plan 2 |" in markdown
    assert "## Plan 2: B" in markdown
    assert "(same as main model)" in markdown  # Sonnet has no pairing in this catalog


def test_markdown_step_costs_are_monthly():
    """Breakdown rows are scaled to the monthly total."""
    comparisons = ComparisonList()
    comparisons.add(_create_result())
    markdown = generate_comparison_markdown(comparisons.entries)
    assert "| Main agent | Produces the final answer from all gathered context | GPT-4.1 | 4,500 | 2,250 | $64.80 |" in markdown


def test_markdown_notes():
    result = _create_result(
        language="en",
        semantic_search_enabled=True,
        search_chunk_count=5,
        search_chunk_size=500,
        reembedding_monthly_chars=10_000_000,
    )
    surcharged = replace(result, long_context_surcharge=True)
    comparisons = ComparisonList()
    comparisons.add(surcharged)
    markdown = generate_comparison_markdown(comparisons.entries)
    assert "long-context surcharge applied" in markdown
    assert "- Re-embedding (monthly, not included above): $0.05" in markdown


def test_markdown_empty():
    assert generate_comparison_markdown(()) == "# LLM running cost comparison\n"


def test_result_values_unchanged_by_list():
    result = _create_result()
    comparisons = ComparisonList()
    entry = comparisons.add(result)
    assert entry.result is result
    assert entry.result.monthly_cost_usd == pytest.approx(64.80)


def _create_search_result(**overrides):
    data = dict(semantic_search_enabled=True, search_chunk_count=5, search_chunk_size=500)
    data.update(overrides)
    return _create_result(**data)


def test_reranking_is_not_a_duplicate():
    """Results that differ only in reranking cost differently and are both kept."""
    plain = _create_search_result()
    reranked = _create_search_result(reranking_enabled=True)
    assert reranked.cost_per_request > plain.cost_per_request
    assert reranked.assumptions != plain.assumptions
    assert reranked.assumptions.stage_models == {"Re-ranking": "GPT-4.1 nano"}
    assert reranked.assumptions.option_details["Re-ranking"] == "on"

    comparisons = ComparisonList()
    comparisons.add(plain)
    assert not comparisons.contains_assumptions(reranked.assumptions)


def test_explicit_stage_model_is_not_a_duplicate():
    cheap = _create_result(orchestrator=True, orchestrator_model_id=2)
    pricey = _create_result(orchestrator=True, orchestrator_model_id=3)
    assert cheap.assumptions.stage_models == {"Orchestrator": "GPT-4.1 nano"}
    assert pricey.assumptions.stage_models == {"Orchestrator": "Claude Sonnet 4.5"}
    comparisons = ComparisonList()
    comparisons.add(cheap)
    assert not comparisons.contains_assumptions(pricey.assumptions)


def test_markdown_reports_per_stage_models():
    """Without a paired auxiliary, explicit stage models are listed instead of the main model."""
    result = _create_result(main_model_id=3, orchestrator=True, orchestrator_model_id=2)
    assert result.assumptions.auxiliary_model_name is None
    comparisons = ComparisonList()
    comparisons.add(result, label="A")
    comparisons.add(_create_result(main_model_id=3), label="B")
    markdown = generate_comparison_markdown(comparisons.entries)
    assert "| Auxiliary model | (per-stage models) | (same as main model) |" in markdown
    assert "- Auxiliary model: (per-stage models)" in markdown
    assert "- Orchestrator model: GPT-4.1 nano" in markdown


def test_markdown_reports_search_resources():
    comparisons = ComparisonList()
    comparisons.add(_create_search_result())
    markdown = generate_comparison_markdown(comparisons.entries)
    assert "- Embedding model: text-embedding-3-small" in markdown
    assert "Web search tool" not in markdown
