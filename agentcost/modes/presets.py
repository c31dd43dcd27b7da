"""
Simple-mode lookup tables: use-case presets, text length presets and defaults.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from agentcost.estimation.data_model import Language
from agentcost.modes.data_model import UseCasePreset


@dataclass(frozen=True)
class SimpleModeDefaults:
    """Fixed assumptions filled in when expanding a simple input."""

    language: Language = "ja"
    monthly_working_days: int = 20
    system_prompt_chars: int = 2000
    avg_turns_per_session: int = 5
    search_chunk_count: int = 5
    search_chunk_size: int = 500
    reembedding_monthly_chars: int = 0
    max_history_turns: int = 10
    compression_frequency: int = 5  # Compress every 5 turns
    web_search_calls_per_request: int = 1
    web_search_result_count: int = 3
    classification_fallback_rate: float = 20.0
    sub_agent_max_calls: int = 2
    prompt_caching: bool = False
    safety_margin: float = 20.0
    exchange_rate: float = 150.0


SIMPLE_MODE_DEFAULTS = SimpleModeDefaults()

USE_CASE_PRESETS: Mapping[str, UseCasePreset] = MappingProxyType(
    {
        "simple_qa": UseCasePreset(
            semantic_search_enabled=False,
            conversation_history=False,
            web_search=False,
            topic_classification=False,
            orchestrator=False,
        ),
        "knowledge_search": UseCasePreset(
            semantic_search_enabled=True,
            conversation_history=False,
            web_search=False,
            topic_classification=False,
            orchestrator=False,
        ),
        "customer_support": UseCasePreset(
            semantic_search_enabled=True,
            conversation_history=True,
            web_search=False,
            topic_classification=True,
            orchestrator=True,
        ),
        "general_assistant": UseCasePreset(
            semantic_search_enabled=True,
            conversation_history=True,
            web_search=True,
            topic_classification=True,
            orchestrator=True,
        ),
    }
)

# Characters per preset; "custom" is resolved from the input itself
INPUT_LENGTH_PRESETS: Mapping[str, int] = MappingProxyType({"short": 200, "medium": 1000, "long": 3000})
OUTPUT_LENGTH_PRESETS: Mapping[str, int] = MappingProxyType({"short": 500, "medium": 1500, "long": 3000})
