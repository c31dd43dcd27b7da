"""
Assumptions: human-readable restatement of a detailed input.
"""

from __future__ import annotations

from agentcost.catalog.entities import Model
from agentcost.estimation.data_model import Assumptions, RequestCostInput
from agentcost.estimation.stages import (
    STEP_HISTORY_COMPRESSION,
    STEP_ORCHESTRATOR,
    STEP_SUB_AGENT,
    STEP_TOPIC_CLASSIFICATION,
)
from agentcost.modes.data_model import DetailedModeInput

OPTION_TOPIC_CLASSIFICATION = "Topic classification"
OPTION_ORCHESTRATOR = "Orchestrator"
OPTION_SEMANTIC_SEARCH = "Semantic search"
OPTION_CONVERSATION_HISTORY = "Conversation history"
OPTION_HISTORY_COMPRESSION = "History compression"
OPTION_WEB_SEARCH = "Web search"
OPTION_PROMPT_CACHING = "Prompt caching"

STAGE_RERANKING = "Re-ranking"
STAGE_SUMMARIZATION = "Search summarization"


def _stage_models(detailed: DetailedModeInput, request: RequestCostInput) -> dict[str, str]:
    """Resolved model name per helper stage that actually runs, in pipeline order."""
    stages: list[tuple[bool, str, Model | None]] = [
        (detailed.topic_classification, STEP_TOPIC_CLASSIFICATION, request.classification_model),
        (detailed.orchestrator, STEP_ORCHESTRATOR, request.orchestrator_model),
        (
            detailed.semantic_search_enabled and detailed.reranking_enabled,
            STAGE_RERANKING,
            request.reranking_model,
        ),
        (
            detailed.web_search and detailed.web_search_summarization,
            STAGE_SUMMARIZATION,
            request.summarization_model,
        ),
        (detailed.sub_agent_max_calls > 0, STEP_SUB_AGENT, request.sub_agent_model),
        (
            detailed.conversation_history and detailed.history_compression,
            STEP_HISTORY_COMPRESSION,
            request.compression_model,
        ),
    ]
    return {name: model.name for active, name, model in stages if active and model is not None}


def build_assumptions(
    detailed: DetailedModeInput,
    request: RequestCostInput,
    auxiliary_model: Model | None = None,
) -> Assumptions:
    """
    Build Assumptions from a detailed input and its resolved request.

    enabled_options lists switched-on options in form order; option_details
    holds the key parameter of each enabled option. stage_models and the
    embedding/tool names come from the resolved request, so explicit
    per-stage model ids are reflected.
    """
    enabled_options: list[str] = []
    option_details: dict[str, str] = {}

    if detailed.topic_classification:
        enabled_options.append(OPTION_TOPIC_CLASSIFICATION)
        option_details["Fallback rate"] = f"{detailed.classification_fallback_rate:g}%"
    if detailed.orchestrator:
        enabled_options.append(OPTION_ORCHESTRATOR)
    if detailed.sub_agent_max_calls > 0:
        option_details["Sub-agent max calls"] = f"{detailed.sub_agent_max_calls} calls"
    if detailed.semantic_search_enabled:
        enabled_options.append(OPTION_SEMANTIC_SEARCH)
        option_details["Chunk count"] = f"{detailed.search_chunk_count} chunks"
        option_details["Chunk size"] = f"{detailed.search_chunk_size} chars"
        if detailed.reranking_enabled:
            option_details[STAGE_RERANKING] = "on"
        if detailed.reembedding_monthly_chars > 0:
            option_details["Re-embedding"] = f"{detailed.reembedding_monthly_chars:,} chars/month"
    if detailed.conversation_history:
        enabled_options.append(OPTION_CONVERSATION_HISTORY)
        option_details["Max history turns"] = f"{detailed.max_history_turns} turns"
        if detailed.history_compression:
            enabled_options.append(OPTION_HISTORY_COMPRESSION)
            option_details["Compression frequency"] = f"every {detailed.compression_frequency} turns"
    if detailed.web_search:
        enabled_options.append(OPTION_WEB_SEARCH)
        option_details["Search calls"] = f"{detailed.web_search_calls_per_request} calls/request"
        option_details["Search results"] = f"{detailed.web_search_result_count} results"
        if detailed.web_search_summarization:
            option_details[STAGE_SUMMARIZATION] = "on"
    if detailed.prompt_caching:
        enabled_options.append(OPTION_PROMPT_CACHING)

    embedding_model = request.embedding_model if detailed.semantic_search_enabled else None
    web_search_tool = request.web_search_tool if detailed.web_search else None

    return Assumptions(
        model_name=request.main_model.name,
        auxiliary_model_name=auxiliary_model.name if auxiliary_model is not None else None,
        provider_name=request.main_model.provider_name,
        daily_requests=detailed.daily_requests,
        monthly_working_days=detailed.monthly_working_days,
        max_input_chars=detailed.max_input_chars,
        max_output_chars=detailed.max_output_chars,
        language=detailed.language,
        system_prompt_chars=detailed.system_prompt_chars,
        avg_turns_per_session=detailed.avg_turns_per_session,
        safety_margin_percent=detailed.safety_margin,
        currency=detailed.currency,
        exchange_rate=detailed.exchange_rate,
        enabled_options=tuple(enabled_options),
        option_details=option_details,
        stage_models=_stage_models(detailed, request),
        embedding_model_name=embedding_model.name if embedding_model is not None else None,
        web_search_tool_name=web_search_tool.name if web_search_tool is not None else None,
    )
