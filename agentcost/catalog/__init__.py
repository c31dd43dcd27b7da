"""Master data: model/embedding/web-search entities, catalog snapshot, loader, auxiliary pairing."""

from agentcost.catalog.catalog import Catalog
from agentcost.catalog.entities import (
    EmbeddingModel,
    Model,
    ModelCategory,
    PricingTier,
    Provider,
    WebSearchTool,
)
from agentcost.catalog.loader import load_catalog
from agentcost.catalog.pairing import (
    MODEL_PAIRINGS,
    get_recommended_auxiliary,
    is_main_model_eligible,
)

__all__ = [
    "Catalog",
    "EmbeddingModel",
    "MODEL_PAIRINGS",
    "Model",
    "ModelCategory",
    "PricingTier",
    "Provider",
    "WebSearchTool",
    "get_recommended_auxiliary",
    "is_main_model_eligible",
    "load_catalog",
]
