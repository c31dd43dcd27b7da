"""
System prompt size estimation from 20 independent prompt-design factors.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from agentcost.estimation.data_model import EstimationLevel

ESTIMATION_BASE_CHARS = 200


def _levels(low: int, medium: int, high: int) -> Mapping[str, int]:
    return MappingProxyType({"none": 0, "low": low, "medium": medium, "high": high})


# Character contribution per factor and level
ESTIMATION_MAPPINGS: Mapping[str, Mapping[str, int]] = MappingProxyType(
    {
        # A. Behaviour constraints and guardrails
        "a1_guardrails": _levels(200, 600, 1500),
        "a2_compliance": _levels(300, 600, 1000),
        "a3_prohibited_topics": _levels(100, 300, 500),
        "a4_priority_rules": _levels(100, 250, 400),
        "a5_error_handling": _levels(200, 400, 600),
        # B. Knowledge and domain
        "b1_domain_knowledge": _levels(300, 1000, 2000),
        "b2_few_shot_examples": _levels(500, 1000, 2000),
        "b3_workflow_definition": _levels(300, 800, 1500),
        # C. Input/output control
        "c1_output_format": _levels(100, 400, 800),
        "c2_persona_tone": _levels(100, 250, 400),
        "c3_response_length": _levels(50, 100, 200),
        "c4_citation_rules": _levels(100, 200, 300),
        "c5_multi_language": _levels(200, 400, 600),
        # D. Tools and integrations
        "d1_tool_definitions": _levels(500, 1500, 3000),
        "d2_reference_instructions": _levels(300, 500, 800),
        "d3_api_integration": _levels(300, 600, 1000),
        # E. Context and session
        "e1_user_segments": _levels(300, 600, 1000),
        "e2_dynamic_context": _levels(100, 300, 500),
        "e3_multi_step_reasoning": _levels(200, 500, 800),
        "e4_exception_handling": _levels(200, 500, 1000),
    }
)

ESTIMATION_FACTORS: tuple[str, ...] = tuple(ESTIMATION_MAPPINGS)


def estimate_system_prompt_chars(estimation: Mapping[str, EstimationLevel]) -> int:
    """
    Estimate system prompt length in characters.

    Returns 200 plus the table value of every factor at its chosen level.
    Factors missing from estimation count as "none"; unknown keys are ignored.
    """
    total = ESTIMATION_BASE_CHARS
    for factor, level in estimation.items():
        mapping = ESTIMATION_MAPPINGS.get(factor)
        if mapping is not None:
            total += mapping[level]
    return total
