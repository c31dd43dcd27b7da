"""
Mode adapter: expand a simple-mode input into a detailed-mode input.
"""

from __future__ import annotations

from collections.abc import Mapping

from agentcost.modes.data_model import DetailedModeInput, SimpleModeInput, UseCasePreset
from agentcost.modes.presets import (
    INPUT_LENGTH_PRESETS,
    OUTPUT_LENGTH_PRESETS,
    SIMPLE_MODE_DEFAULTS,
    USE_CASE_PRESETS,
    SimpleModeDefaults,
)


def _resolve_length(
    preset: str,
    custom_chars: int | None,
    presets: Mapping[str, int],
) -> int:
    if preset == "custom":
        # A custom preset without a value falls back to medium
        return custom_chars if custom_chars is not None else presets["medium"]
    return presets[preset]


def convert_simple_to_detailed(
    simple: SimpleModeInput,
    auxiliary_model_id: int | None = None,
    *,
    use_case_presets: Mapping[str, UseCasePreset] = USE_CASE_PRESETS,
    defaults: SimpleModeDefaults = SIMPLE_MODE_DEFAULTS,
    input_length_presets: Mapping[str, int] = INPUT_LENGTH_PRESETS,
    output_length_presets: Mapping[str, int] = OUTPUT_LENGTH_PRESETS,
) -> DetailedModeInput:
    """
    Expand a SimpleModeInput using the use-case preset and fixed defaults.

    - The use-case preset switches semantic search, conversation history,
      web search, topic classification and orchestrator.
    - Conversation history also enables history compression every
      defaults.compression_frequency turns.
    - Sub-agent calls are only assumed when an orchestrator is present.
    - auxiliary_model_id, when given, becomes the model for every optional
      stage; otherwise those ids stay None and are resolved by the caller.

    Lookup tables are parameters so callers can substitute their own rules.
    """
    preset = use_case_presets[simple.use_case_type]
    aux = auxiliary_model_id
    history = preset.conversation_history

    return DetailedModeInput(
        main_model_id=simple.model_id,
        daily_requests=simple.daily_requests,
        monthly_working_days=defaults.monthly_working_days,
        max_input_chars=_resolve_length(
            simple.input_length_preset, simple.custom_input_chars, input_length_presets
        ),
        max_output_chars=_resolve_length(
            simple.output_length_preset, simple.custom_output_chars, output_length_presets
        ),
        language=defaults.language,
        system_prompt_chars=defaults.system_prompt_chars,
        avg_turns_per_session=defaults.avg_turns_per_session,
        auxiliary_model_id=aux,
        topic_classification=preset.topic_classification,
        classification_fallback_rate=defaults.classification_fallback_rate,
        classification_model_id=aux,
        orchestrator=preset.orchestrator,
        orchestrator_model_id=aux,
        sub_agent_max_calls=defaults.sub_agent_max_calls if preset.orchestrator else 0,
        sub_agent_model_id=aux,
        semantic_search_enabled=preset.semantic_search_enabled,
        search_chunk_count=defaults.search_chunk_count,
        search_chunk_size=defaults.search_chunk_size,
        embedding_model_id=None,
        reranking_enabled=False,
        reranking_model_id=aux,
        reembedding_monthly_chars=defaults.reembedding_monthly_chars,
        conversation_history=history,
        max_history_turns=defaults.max_history_turns,
        history_compression=history,
        compression_frequency=defaults.compression_frequency if history else 0,
        compression_model_id=aux,
        web_search=preset.web_search,
        web_search_tool_id=None,
        web_search_calls_per_request=defaults.web_search_calls_per_request,
        web_search_result_count=defaults.web_search_result_count,
        web_search_summarization=False,
        summarization_model_id=aux,
        prompt_caching=defaults.prompt_caching,
        safety_margin=defaults.safety_margin,
        currency="USD",
        exchange_rate=defaults.exchange_rate,
    )
