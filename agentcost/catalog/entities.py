"""
Master-data entities: providers, text-generation models, embedding models, web search tools.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ModelCategory = Literal["flagship", "standard", "lightweight", "reasoning"]
PricingTier = Literal["online", "batch"]

MODEL_CATEGORIES: tuple[str, ...] = ("flagship", "standard", "lightweight", "reasoning")
PRICING_TIERS: tuple[str, ...] = ("online", "batch")


@dataclass(frozen=True)
class Provider:
    """An LLM vendor."""

    id: int
    name: str


@dataclass(frozen=True)
class Model:
    """
    Text-generation model with per-1M-token USD pricing.

    provider_name is denormalized from Provider. The long-context surcharge is
    decided by comparing this string against a fixed provider set rather than
    by a capability flag on the model, so renaming a provider changes pricing.
    """

    id: int
    provider_id: int
    provider_name: str
    name: str
    category: ModelCategory
    input_price: float  # USD per 1M input tokens
    output_price: float  # USD per 1M output tokens
    cache_write_price: float | None = None
    cache_read_price: float | None = None  # Cached input price, None if unsupported
    max_context_length: int | None = None
    is_legacy: bool = False


@dataclass(frozen=True)
class EmbeddingModel:
    """Embedding model priced per 1M input tokens."""

    id: int
    provider_id: int
    provider_name: str
    name: str
    input_price: float
    dimensions: int | None = None
    pricing_tier: PricingTier = "online"


@dataclass(frozen=True)
class WebSearchTool:
    """Web search / grounding API priced per 1,000 calls."""

    id: int
    provider_id: int
    provider_name: str
    name: str
    price_per_k_calls: float
    additional_pricing_notes: str | None = None
