"""
Main/auxiliary model pairing: cheaper same-provider models recommended for non-primary stages.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from agentcost.catalog.entities import Model

# Main model name -> recommended auxiliary model name (same provider)
MODEL_PAIRINGS: Mapping[str, str] = MappingProxyType(
    {
        # OpenAI
        "GPT-5.2": "GPT-4.1 mini",
        "GPT-5.2 pro": "GPT-5 mini",
        "GPT-5 mini": "GPT-4.1 nano",
        "GPT-4.1": "GPT-4.1 nano",
        "GPT-4.1 mini": "GPT-4.1 nano",
        "GPT-4o": "GPT-4o-mini",
        "o4-mini": "GPT-4.1 nano",
        "o3-mini": "GPT-4.1 nano",
        # Anthropic
        "Claude Opus 4.6": "Claude Haiku 4.5",
        "Claude Sonnet 4.5": "Claude Haiku 4.5",
        # Google
        "Gemini 3 Pro Preview": "Gemini 3 Flash Preview",
        "Gemini 3 Flash Preview": "Gemini 2.5 Flash Lite",
        "Gemini 2.5 Pro": "Gemini 2.5 Flash",
        "Gemini 2.5 Flash": "Gemini 2.5 Flash Lite",
        "Gemini 2.0 Flash": "Gemini 2.0 Flash Lite",
    }
)


def get_recommended_auxiliary(
    main_model: Model,
    models: Iterable[Model],
    pairings: Mapping[str, str] = MODEL_PAIRINGS,
) -> Model | None:
    """
    Resolve the recommended auxiliary model for main_model.

    Returns the first non-legacy model in models whose name matches the
    pairing entry, or None when there is no pairing or no such model.
    """
    auxiliary_name = pairings.get(main_model.name)
    if auxiliary_name is None:
        return None
    for model in models:
        if model.name == auxiliary_name and not model.is_legacy:
            return model
    return None


def is_main_model_eligible(
    model: Model,
    pairings: Mapping[str, str] = MODEL_PAIRINGS,
) -> bool:
    """True for flagship/standard/reasoning models that have an auxiliary pairing."""
    return model.category != "lightweight" and model.name in pairings
