"""
CostCalculator: orchestrates model resolution, request costing and extrapolation.
"""

from __future__ import annotations

import logging

from agentcost.catalog.catalog import Catalog
from agentcost.catalog.entities import Model
from agentcost.catalog.pairing import get_recommended_auxiliary
from agentcost.estimation.aggregation import calc_request_cost
from agentcost.estimation.data_model import CostResult, RequestCostInput
from agentcost.estimation.extrapolation import calc_monthly_cost
from agentcost.estimation.stages import calc_reembedding_cost
from agentcost.modes.assumptions import build_assumptions
from agentcost.modes.data_model import DetailedModeInput, SimpleModeInput
from agentcost.modes.simple import convert_simple_to_detailed

logger = logging.getLogger(__name__)


class CostCalculator:
    """Monthly cost estimation against a fixed catalog snapshot."""

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog

    def resolve_auxiliary(self, detailed: DetailedModeInput, main_model: Model) -> Model | None:
        """Explicit auxiliary id first, then the pairing recommendation."""
        if detailed.auxiliary_model_id is not None:
            return self.catalog.find_model(detailed.auxiliary_model_id)
        return get_recommended_auxiliary(main_model, self.catalog.models)

    def build_request_input(self, detailed: DetailedModeInput) -> RequestCostInput:
        """
        Resolve catalog ids into a RequestCostInput.

        Helper stages default to the auxiliary model (main model when there is
        none); sub-agents default to the main model. Unknown explicit ids fall
        back to the same defaults.

        Raises:
            KeyError: If main_model_id is not in the catalog
        """
        main_model = self._require_main_model(detailed.main_model_id)
        auxiliary_model = self.resolve_auxiliary(detailed, main_model)
        aux_or_main = auxiliary_model or main_model

        def resolve(model_id: int | None, default: Model) -> Model:
            if model_id is not None:
                return self.catalog.find_model(model_id) or default
            return default

        return RequestCostInput(
            main_model=main_model,
            language=detailed.language,
            system_prompt_chars=detailed.system_prompt_chars,
            max_input_chars=detailed.max_input_chars,
            max_output_chars=detailed.max_output_chars,
            avg_turns_per_session=detailed.avg_turns_per_session,
            topic_classification=detailed.topic_classification,
            classification_fallback_rate=detailed.classification_fallback_rate,
            classification_model=resolve(detailed.classification_model_id, aux_or_main),
            orchestrator=detailed.orchestrator,
            orchestrator_model=resolve(detailed.orchestrator_model_id, aux_or_main),
            sub_agent_max_calls=detailed.sub_agent_max_calls,
            sub_agent_model=resolve(detailed.sub_agent_model_id, main_model),
            semantic_search_enabled=detailed.semantic_search_enabled,
            search_chunk_count=detailed.search_chunk_count,
            search_chunk_size=detailed.search_chunk_size,
            embedding_model=self.catalog.find_embedding_model(detailed.embedding_model_id),
            reranking_enabled=detailed.reranking_enabled,
            reranking_model=resolve(detailed.reranking_model_id, aux_or_main),
            reembedding_monthly_chars=detailed.reembedding_monthly_chars,
            conversation_history=detailed.conversation_history,
            max_history_turns=detailed.max_history_turns,
            history_compression=detailed.history_compression,
            compression_frequency=detailed.compression_frequency,
            compression_model=resolve(detailed.compression_model_id, aux_or_main),
            web_search=detailed.web_search,
            web_search_tool=self.catalog.find_web_search_tool(detailed.web_search_tool_id),
            web_search_calls_per_request=detailed.web_search_calls_per_request,
            web_search_result_count=detailed.web_search_result_count,
            web_search_summarization=detailed.web_search_summarization,
            summarization_model=resolve(detailed.summarization_model_id, aux_or_main),
            prompt_caching=detailed.prompt_caching,
        )

    def calculate(self, detailed: DetailedModeInput) -> CostResult:
        """
        Compute the full CostResult for a detailed input.

        Pipeline:
        1. Resolve models from the catalog
        2. Aggregate per-request cost
        3. Extrapolate to daily/monthly/annual cost with margin and FX
        4. Cost monthly re-embedding separately
        5. Restate the input as Assumptions
        """
        request = self.build_request_input(detailed)
        auxiliary_model = self.resolve_auxiliary(detailed, request.main_model)
        logger.debug(
            "Calculating cost for %s (auxiliary: %s)",
            request.main_model.name,
            auxiliary_model.name if auxiliary_model else "none",
        )

        request_cost = calc_request_cost(request)
        monthly = calc_monthly_cost(
            request_cost.cost_per_request,
            detailed.daily_requests,
            detailed.monthly_working_days,
            detailed.safety_margin,
            detailed.exchange_rate,
        )
        reembedding = calc_reembedding_cost(
            detailed.reembedding_monthly_chars if detailed.semantic_search_enabled else 0,
            request.embedding_model,
            detailed.language,
        )

        return CostResult(
            cost_per_request=request_cost.cost_per_request,
            steps=request_cost.steps,
            daily_cost_usd=monthly.daily_cost_usd,
            monthly_cost_usd=monthly.monthly_cost_usd,
            monthly_cost_before_margin=monthly.monthly_cost_before_margin,
            monthly_cost_jpy=monthly.monthly_cost_jpy,
            annual_cost_usd=monthly.annual_cost_usd,
            annual_cost_jpy=monthly.annual_cost_jpy,
            total_input_tokens=request_cost.total_input_tokens,
            total_output_tokens=request_cost.total_output_tokens,
            safety_margin_rate=detailed.safety_margin,
            exchange_rate=detailed.exchange_rate,
            long_context_surcharge=request_cost.long_context_surcharge,
            assumptions=build_assumptions(detailed, request, auxiliary_model),
            reembedding=reembedding,
        )

    def calculate_simple(self, simple: SimpleModeInput) -> CostResult:
        """Expand a simple input with the recommended auxiliary model, then calculate."""
        main_model = self._require_main_model(simple.model_id)
        auxiliary_model = get_recommended_auxiliary(main_model, self.catalog.models)
        detailed = convert_simple_to_detailed(
            simple, auxiliary_model.id if auxiliary_model is not None else None
        )
        return self.calculate(detailed)

    def _require_main_model(self, model_id: int) -> Model:
        model = self.catalog.find_model(model_id)
        if model is None:
            raise KeyError(f"Main model id {model_id} not found in catalog")
        return model
