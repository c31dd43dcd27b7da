"""
Catalog: immutable master-data snapshot with id lookups.
"""

from __future__ import annotations

from dataclasses import dataclass

from agentcost.catalog.entities import EmbeddingModel, Model, Provider, WebSearchTool


@dataclass(frozen=True)
class Catalog:
    """
    Snapshot of providers, models, embedding models and web search tools.

    Captured once and passed into calculations; a pricing update means a new
    Catalog, never a mutation of this one.
    """

    providers: tuple[Provider, ...] = ()
    models: tuple[Model, ...] = ()
    embedding_models: tuple[EmbeddingModel, ...] = ()
    web_search_tools: tuple[WebSearchTool, ...] = ()

    def find_model(self, model_id: int | None) -> Model | None:
        """Return the model with model_id, or None."""
        if model_id is None:
            return None
        for model in self.models:
            if model.id == model_id:
                return model
        return None

    def find_embedding_model(self, model_id: int | None) -> EmbeddingModel | None:
        """
        Return the embedding model with model_id.

        A None id selects the first embedding model in the catalog.
        """
        if model_id is None:
            return self.embedding_models[0] if self.embedding_models else None
        for model in self.embedding_models:
            if model.id == model_id:
                return model
        return None

    def find_web_search_tool(self, tool_id: int | None) -> WebSearchTool | None:
        """
        Return the web search tool with tool_id.

        A None id selects the first tool in the catalog.
        """
        if tool_id is None:
            return self.web_search_tools[0] if self.web_search_tools else None
        for tool in self.web_search_tools:
            if tool.id == tool_id:
                return tool
        return None
