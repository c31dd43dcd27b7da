"""
Request aggregation: compose stage costs into a per-request total.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from agentcost.estimation.data_model import RequestCost, RequestCostInput, StepCost
from agentcost.estimation.stages import (
    calc_compression_cost,
    calc_conversation_history_cost,
    calc_main_agent_cost,
    calc_orchestrator_cost,
    calc_semantic_search_cost,
    calc_sub_agent_cost,
    calc_topic_classification_cost,
    calc_web_search_cost,
)

logger = logging.getLogger(__name__)

LONG_CONTEXT_THRESHOLD_TOKENS = 200_000
LONG_CONTEXT_SURCHARGE_MULTIPLIER = 2
# Matched against Model.provider_name; OpenAI does not charge a long-context premium
LONG_CONTEXT_SURCHARGE_PROVIDERS: frozenset[str] = frozenset({"Anthropic", "Google"})


def calc_request_cost(request: RequestCostInput) -> RequestCost:
    """
    Compute the cost of one request across all enabled pipeline stages.

    Pipeline:
    1. Classification, orchestrator, semantic search, web search and history
    2. Main agent, fed with history, retrieved chunk and web result tokens
    3. Long-context surcharge on the main agent (> 200K input tokens,
       Anthropic or Google main model)
    4. Sub-agent and history compression

    Steps are returned in pipeline order: classification, orchestrator,
    search, web, history, main agent, sub-agent, compression. Stages that
    contribute nothing are omitted, except search and web which are listed
    whenever enabled.
    """
    language = request.language
    input_chars = request.max_input_chars
    output_chars = request.max_output_chars

    classification_step = calc_topic_classification_cost(
        request.topic_classification,
        request.classification_fallback_rate,
        request.classification_model,
        request.embedding_model,
        language,
        input_chars,
    )
    orchestrator_step = calc_orchestrator_cost(
        request.orchestrator,
        request.orchestrator_model,
        language,
        input_chars,
        output_chars,
    )
    search_step = calc_semantic_search_cost(
        request.semantic_search_enabled,
        request.search_chunk_count,
        request.search_chunk_size,
        request.embedding_model,
        request.reranking_enabled,
        request.reranking_model,
        language,
        input_chars,
    )
    web_step = calc_web_search_cost(
        request.web_search,
        request.web_search_tool,
        request.web_search_calls_per_request,
        request.web_search_result_count,
        request.web_search_summarization,
        request.summarization_model,
        language,
    )
    # Only the token count is used here; history is billed as main-agent input
    history_step = calc_conversation_history_cost(
        request.conversation_history,
        request.max_history_turns,
        language,
        input_chars,
        output_chars,
    )

    main_step = calc_main_agent_cost(
        request.main_model,
        language,
        request.system_prompt_chars,
        input_chars,
        output_chars,
        history_step.input_tokens,
        search_step.input_tokens,
        web_step.input_tokens if request.web_search else 0,
        request.prompt_caching,
    )

    long_context_surcharge = False
    if (
        main_step.input_tokens > LONG_CONTEXT_THRESHOLD_TOKENS
        and request.main_model.provider_name in LONG_CONTEXT_SURCHARGE_PROVIDERS
    ):
        main_step = replace(main_step, cost_usd=main_step.cost_usd * LONG_CONTEXT_SURCHARGE_MULTIPLIER)
        long_context_surcharge = True
        logger.debug(
            "Long-context surcharge applied to %s (%d input tokens)",
            request.main_model.name,
            main_step.input_tokens,
        )

    sub_agent_step = calc_sub_agent_cost(
        request.sub_agent_max_calls,
        request.sub_agent_model,
        language,
        input_chars,
        output_chars,
    )
    compression_step = calc_compression_cost(
        request.history_compression,
        request.compression_frequency,
        request.compression_model,
        language,
        input_chars,
        output_chars,
        request.max_history_turns,
    )

    steps: list[StepCost] = []
    if classification_step.cost_usd > 0:
        steps.append(classification_step)
    if orchestrator_step.cost_usd > 0:
        steps.append(orchestrator_step)
    if request.semantic_search_enabled:
        steps.append(search_step)
    if request.web_search:
        steps.append(web_step)
    if history_step.input_tokens > 0:
        steps.append(history_step)
    steps.append(main_step)
    if sub_agent_step.cost_usd > 0:
        steps.append(sub_agent_step)
    if compression_step.cost_usd > 0:
        steps.append(compression_step)

    return RequestCost(
        cost_per_request=sum(step.cost_usd for step in steps),
        steps=tuple(steps),
        total_input_tokens=sum(step.input_tokens for step in steps),
        total_output_tokens=sum(step.output_tokens for step in steps),
        long_context_surcharge=long_context_surcharge,
    )
