"""
Stage costing: one pure function per optional pipeline stage.

Every function returns a StepCost. A disabled stage, or one missing the model
it needs, yields a zero-cost StepCost carrying only the stage's canonical name.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from agentcost.catalog.entities import EmbeddingModel, Model, WebSearchTool
from agentcost.estimation.data_model import Language, StepCost
from agentcost.estimation.tokens import round_half_up, token_cost, tokens_from_chars

STEP_TOPIC_CLASSIFICATION = "Topic classification"
STEP_ORCHESTRATOR = "Orchestrator"
STEP_SEMANTIC_SEARCH = "Semantic search"
STEP_REEMBEDDING = "Re-embedding"
STEP_WEB_SEARCH = "Web search"
STEP_CONVERSATION_HISTORY = "Conversation history"
STEP_MAIN_AGENT = "Main agent"
STEP_SUB_AGENT = "Sub-agent"
STEP_HISTORY_COMPRESSION = "History compression"

STEP_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {
        STEP_TOPIC_CLASSIFICATION: "Classifies the user request and routes it to the right flow",
        STEP_ORCHESTRATOR: "Coordinates the agents and decides the processing route",
        STEP_SEMANTIC_SEARCH: "Retrieves related passages from the document index",
        STEP_REEMBEDDING: "Keeps the search index current as documents change",
        STEP_WEB_SEARCH: "Looks up current information on the web",
        STEP_CONVERSATION_HISTORY: "Carries previous turns into the prompt for context",
        STEP_MAIN_AGENT: "Produces the final answer from all gathered context",
        STEP_SUB_AGENT: "Specialised helper agent calls (translation, summarising, analysis)",
        STEP_HISTORY_COMPRESSION: "Summarises long history to stay inside the context window",
    }
)

CLASSIFICATION_OUTPUT_TOKENS = 50
ORCHESTRATOR_MAX_OUTPUT_CHARS = 500
RERANK_OUTPUT_TOKENS = 100
WEB_RESULT_CHARS = 2000  # Assumed size of one search result
SUMMARY_CHARS = 500  # Web summary and history compression output


def _empty_step(name: str) -> StepCost:
    return StepCost(
        name=name,
        model_name="",
        description="",
        input_tokens=0,
        output_tokens=0,
        cost_usd=0.0,
    )


def _step(
    name: str,
    model_names: list[str],
    input_tokens: int,
    output_tokens: int,
    cost_usd: float,
) -> StepCost:
    return StepCost(
        name=name,
        model_name=" + ".join(model_names),
        description=STEP_DESCRIPTIONS[name],
        input_tokens=input_tokens,
        output_tokens=output_tokens,
        cost_usd=cost_usd,
    )


def calc_topic_classification_cost(
    enabled: bool,
    fallback_rate: float,
    classification_model: Model | None,
    embedding_model: EmbeddingModel | None,
    language: Language,
    input_chars: int,
) -> StepCost:
    """
    Semantic classification via one embedding call, with an LLM fallback.

    The LLM classifies fallback_rate percent of requests with a fixed
    50-token answer; its cost and reported output tokens are weighted by
    that probability.
    """
    if not enabled or (classification_model is None and embedding_model is None):
        return _empty_step(STEP_TOPIC_CLASSIFICATION)

    input_tokens = tokens_from_chars(input_chars, language)
    rate = fallback_rate / 100
    cost = 0.0
    model_names: list[str] = []

    if embedding_model is not None:
        cost += token_cost(input_tokens, embedding_model.input_price)
        model_names.append(embedding_model.name)

    output_tokens = 0
    if classification_model is not None and fallback_rate > 0:
        llm_cost = token_cost(input_tokens, classification_model.input_price) + token_cost(
            CLASSIFICATION_OUTPUT_TOKENS, classification_model.output_price
        )
        cost += llm_cost * rate
        output_tokens = round_half_up(CLASSIFICATION_OUTPUT_TOKENS * rate)
        model_names.append(classification_model.name)

    return _step(STEP_TOPIC_CLASSIFICATION, model_names, input_tokens, output_tokens, cost)


def calc_orchestrator_cost(
    enabled: bool,
    model: Model | None,
    language: Language,
    input_chars: int,
    output_chars: int,
) -> StepCost:
    """Routing decision; its response is capped at 500 characters."""
    if not enabled or model is None:
        return _empty_step(STEP_ORCHESTRATOR)

    input_tokens = tokens_from_chars(input_chars, language)
    output_tokens = tokens_from_chars(min(output_chars, ORCHESTRATOR_MAX_OUTPUT_CHARS), language)
    cost = token_cost(input_tokens, model.input_price) + token_cost(output_tokens, model.output_price)
    return _step(STEP_ORCHESTRATOR, [model.name], input_tokens, output_tokens, cost)


def calc_semantic_search_cost(
    enabled: bool,
    chunk_count: int,
    chunk_size: int,
    embedding_model: EmbeddingModel | None,
    reranking_enabled: bool,
    reranking_model: Model | None,
    language: Language,
    input_chars: int,
) -> StepCost:
    """
    Query embedding plus optional LLM reranking of the retrieved chunks.

    Reported input_tokens are the retrieved chunk tokens, which the main
    agent receives as extra context.
    """
    if not enabled:
        return _empty_step(STEP_SEMANTIC_SEARCH)

    query_tokens = tokens_from_chars(input_chars, language)
    chunk_tokens = tokens_from_chars(chunk_count * chunk_size, language)
    cost = 0.0
    model_names: list[str] = []

    if embedding_model is not None:
        cost += token_cost(query_tokens, embedding_model.input_price)
        model_names.append(embedding_model.name)

    rerank_output_tokens = 0
    if reranking_enabled and reranking_model is not None:
        rerank_output_tokens = RERANK_OUTPUT_TOKENS
        cost += token_cost(chunk_tokens + query_tokens, reranking_model.input_price) + token_cost(
            rerank_output_tokens, reranking_model.output_price
        )
        model_names.append(reranking_model.name)

    return _step(STEP_SEMANTIC_SEARCH, model_names, chunk_tokens, rerank_output_tokens, cost)


def calc_reembedding_cost(
    monthly_chars: int,
    embedding_model: EmbeddingModel | None,
    language: Language,
) -> StepCost:
    """Monthly cost of re-embedding updated documents (not per request)."""
    if monthly_chars <= 0 or embedding_model is None:
        return _empty_step(STEP_REEMBEDDING)

    tokens = tokens_from_chars(monthly_chars, language)
    cost = token_cost(tokens, embedding_model.input_price)
    return _step(STEP_REEMBEDDING, [embedding_model.name], tokens, 0, cost)


def calc_web_search_cost(
    enabled: bool,
    web_search_tool: WebSearchTool | None,
    calls_per_request: int,
    result_count: int,
    summarization: bool,
    summarization_model: Model | None,
    language: Language,
) -> StepCost:
    """
    Search API calls plus optional LLM summarisation of the results.

    Free-tier quotas are never applied.
    """
    if not enabled or web_search_tool is None:
        return _empty_step(STEP_WEB_SEARCH)

    cost = calls_per_request / 1000 * web_search_tool.price_per_k_calls
    result_tokens = tokens_from_chars(result_count * WEB_RESULT_CHARS, language)
    model_names = [web_search_tool.name]

    output_tokens = 0
    if summarization and summarization_model is not None:
        output_tokens = tokens_from_chars(SUMMARY_CHARS, language)
        cost += token_cost(result_tokens, summarization_model.input_price) + token_cost(
            output_tokens, summarization_model.output_price
        )
        model_names.append(summarization_model.name)

    return _step(STEP_WEB_SEARCH, model_names, result_tokens, output_tokens, cost)


def calc_conversation_history_cost(
    enabled: bool,
    max_history_turns: int,
    language: Language,
    input_chars: int,
    output_chars: int,
) -> StepCost:
    """
    Average extra context from previous turns.

    On average half of max_history_turns is carried. Cost is always 0: the
    tokens are billed as main-agent input.
    """
    if not enabled:
        return _empty_step(STEP_CONVERSATION_HISTORY)

    history_chars = (max_history_turns / 2) * (input_chars + output_chars)
    history_tokens = tokens_from_chars(history_chars, language)
    return StepCost(
        name=STEP_CONVERSATION_HISTORY,
        model_name="",
        description=STEP_DESCRIPTIONS[STEP_CONVERSATION_HISTORY],
        input_tokens=history_tokens,
        output_tokens=0,
        cost_usd=0.0,
    )


def calc_main_agent_cost(
    model: Model,
    language: Language,
    system_prompt_chars: int,
    input_chars: int,
    output_chars: int,
    history_tokens: int,
    rag_tokens: int,
    web_tokens: int,
    prompt_caching: bool,
) -> StepCost:
    """
    User-facing response over system prompt, user input and gathered context.

    With prompt caching and a cache-read price, the system prompt is billed at
    the cache-read price and the rest of the input at the normal input price.
    """
    sys_prompt_tokens = tokens_from_chars(system_prompt_chars, language)
    user_input_tokens = tokens_from_chars(input_chars, language)
    total_input_tokens = (
        sys_prompt_tokens + user_input_tokens + history_tokens + rag_tokens + web_tokens
    )
    output_tokens = tokens_from_chars(output_chars, language)

    if prompt_caching and model.cache_read_price is not None:
        non_cached_tokens = total_input_tokens - sys_prompt_tokens
        input_cost = token_cost(sys_prompt_tokens, model.cache_read_price) + token_cost(
            non_cached_tokens, model.input_price
        )
    else:
        input_cost = token_cost(total_input_tokens, model.input_price)

    cost = input_cost + token_cost(output_tokens, model.output_price)
    return _step(STEP_MAIN_AGENT, [model.name], total_input_tokens, output_tokens, cost)


def calc_sub_agent_cost(
    max_calls: int,
    model: Model | None,
    language: Language,
    input_chars: int,
    output_chars: int,
) -> StepCost:
    """Helper agent calls; tokens and cost scale linearly with max_calls."""
    if max_calls == 0 or model is None:
        return _empty_step(STEP_SUB_AGENT)

    input_tokens = tokens_from_chars(input_chars, language)
    output_tokens = tokens_from_chars(output_chars, language)
    cost_per_call = token_cost(input_tokens, model.input_price) + token_cost(
        output_tokens, model.output_price
    )
    return _step(
        STEP_SUB_AGENT,
        [model.name],
        input_tokens * max_calls,
        output_tokens * max_calls,
        cost_per_call * max_calls,
    )


def calc_compression_cost(
    enabled: bool,
    frequency: int,
    model: Model | None,
    language: Language,
    input_chars: int,
    output_chars: int,
    max_history_turns: int,
) -> StepCost:
    """
    History summarisation, amortised over requests.

    One compression of the full history runs every `frequency` turns, so
    each request carries 1/frequency of its cost.
    """
    if not enabled or frequency == 0 or model is None:
        return _empty_step(STEP_HISTORY_COMPRESSION)

    history_tokens = tokens_from_chars(max_history_turns * (input_chars + output_chars), language)
    summary_tokens = tokens_from_chars(SUMMARY_CHARS, language)
    cost_per_compression = token_cost(history_tokens, model.input_price) + token_cost(
        summary_tokens, model.output_price
    )
    return _step(
        STEP_HISTORY_COMPRESSION,
        [model.name],
        history_tokens,
        summary_tokens,
        cost_per_compression / frequency,
    )
