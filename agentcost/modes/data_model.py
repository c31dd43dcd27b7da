"""
Calculator input modes: five-field simple input and the full id-based detailed input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from agentcost.estimation.data_model import Currency, Language

UseCaseType = Literal["simple_qa", "knowledge_search", "customer_support", "general_assistant"]
TextLengthPreset = Literal["short", "medium", "long", "custom"]

USE_CASE_TYPES: tuple[str, ...] = (
    "simple_qa",
    "knowledge_search",
    "customer_support",
    "general_assistant",
)
TEXT_LENGTH_PRESETS: tuple[str, ...] = ("short", "medium", "long", "custom")


@dataclass(frozen=True)
class UseCasePreset:
    """Optional stages switched on by a use-case type."""

    semantic_search_enabled: bool
    conversation_history: bool
    web_search: bool
    topic_classification: bool
    orchestrator: bool


@dataclass(frozen=True)
class SimpleModeInput:
    """
    Rough-estimate input: model, traffic, text length presets and use case.

    custom_input_chars / custom_output_chars are read only when the matching
    preset is "custom".
    """

    model_id: int
    daily_requests: int
    input_length_preset: TextLengthPreset
    output_length_preset: TextLengthPreset
    use_case_type: UseCaseType
    custom_input_chars: int | None = None
    custom_output_chars: int | None = None


@dataclass(frozen=True)
class DetailedModeInput:
    """
    Full calculator input referencing catalog entries by id.

    A None model id means "use the default": the auxiliary model (or the main
    model when there is none) for helper stages, the main model for
    sub-agents, the first catalog entry for embedding and web search.
    """

    # Basic settings
    main_model_id: int
    daily_requests: int
    monthly_working_days: int
    max_input_chars: int
    max_output_chars: int
    language: Language = "ja"
    system_prompt_chars: int = 0
    avg_turns_per_session: int = 1
    auxiliary_model_id: int | None = None

    # Multi-agent
    topic_classification: bool = False
    classification_fallback_rate: float = 0.0
    classification_model_id: int | None = None
    orchestrator: bool = False
    orchestrator_model_id: int | None = None
    sub_agent_max_calls: int = 0
    sub_agent_model_id: int | None = None

    # Semantic search
    semantic_search_enabled: bool = False
    search_chunk_count: int = 0
    search_chunk_size: int = 0
    embedding_model_id: int | None = None
    reranking_enabled: bool = False
    reranking_model_id: int | None = None
    reembedding_monthly_chars: int = 0

    # Conversation history
    conversation_history: bool = False
    max_history_turns: int = 0
    history_compression: bool = False
    compression_frequency: int = 0
    compression_model_id: int | None = None

    # Web search
    web_search: bool = False
    web_search_tool_id: int | None = None
    web_search_calls_per_request: int = 0
    web_search_result_count: int = 0
    web_search_summarization: bool = False
    summarization_model_id: int | None = None

    # Cost adjustment
    prompt_caching: bool = False
    safety_margin: float = 0.0  # percent
    currency: Currency = "USD"
    exchange_rate: float = 150.0  # JPY per USD
