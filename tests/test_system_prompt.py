"""Tests for system prompt size estimation from design factors."""

from agentcost.estimation import (
    ESTIMATION_BASE_CHARS,
    ESTIMATION_FACTORS,
    ESTIMATION_MAPPINGS,
    estimate_system_prompt_chars,
)


def test_twenty_factors():
    assert len(ESTIMATION_FACTORS) == 20
    for factor in ESTIMATION_FACTORS:
        assert set(ESTIMATION_MAPPINGS[factor]) == {"none", "low", "medium", "high"}
        assert ESTIMATION_MAPPINGS[factor]["none"] == 0


def test_levels_increase():
    """Within a factor, a higher level never adds fewer characters."""
    for mapping in ESTIMATION_MAPPINGS.values():
        assert mapping["none"] <= mapping["low"] <= mapping["medium"] <= mapping["high"]


def test_all_none_is_base():
    estimation = {factor: "none" for factor in ESTIMATION_FACTORS}
    assert estimate_system_prompt_chars(estimation) == ESTIMATION_BASE_CHARS == 200


def test_empty_estimation_is_base():
    assert estimate_system_prompt_chars({}) == 200


def test_all_high():
    estimation = {factor: "high" for factor in ESTIMATION_FACTORS}
    expected = 200 + sum(ESTIMATION_MAPPINGS[f]["high"] for f in ESTIMATION_FACTORS)
    assert estimate_system_prompt_chars(estimation) == expected == 20100


def test_single_factor():
    assert estimate_system_prompt_chars({"a1_guardrails": "medium"}) == 800
    assert estimate_system_prompt_chars({"d1_tool_definitions": "high"}) == 3200


def test_unknown_factor_ignored():
    assert estimate_system_prompt_chars({"z9_unknown": "high", "c3_response_length": "low"}) == 250
