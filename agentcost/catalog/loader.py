"""
Catalog loader: supports YAML files, dicts, Catalog instances.

Expected layout (YAML or dict)::

    providers:
      - name: Anthropic
        models:
          - name: Claude Sonnet 4.5
            category: standard
            input_price: 3.0
            output_price: 15.0
            cache_read_price: 0.3
        embedding_models: [...]
        web_search_tools: [...]

Ids are optional; a missing id is one past the highest id assigned so far for
its entity type, the way the master-data store assigns serial keys. Ids must
be unique per entity type.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from agentcost.catalog.catalog import Catalog
from agentcost.catalog.entities import (
    MODEL_CATEGORIES,
    PRICING_TIERS,
    EmbeddingModel,
    Model,
    Provider,
    WebSearchTool,
)

logger = logging.getLogger(__name__)


def load_catalog(source: Catalog | str | Path | dict) -> Catalog:
    """
    Load a Catalog from various sources.

    Args:
        source: Can be:
            - Catalog instance: returned as-is
            - str or Path: treated as YAML file path
            - dict: constructed directly from dict keys

    Returns:
        Catalog instance

    Raises:
        FileNotFoundError: If source is a file path that doesn't exist
        ValueError: If the content is malformed or has invalid types
        TypeError: If source has an unsupported type
    """
    if isinstance(source, Catalog):
        return source

    if isinstance(source, (str, Path)):
        return _load_from_yaml_file(source)

    if isinstance(source, dict):
        return _load_from_dict(source)

    raise TypeError(f"Unsupported source type for load_catalog: {type(source).__name__}")


def _load_from_yaml_file(path: str | Path) -> Catalog:
    """Load Catalog from a YAML file."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {file_path}")

    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML file {file_path}: {e}") from e

    if data is None:
        raise ValueError(f"YAML file {file_path} is empty")
    if not isinstance(data, dict):
        raise ValueError(f"YAML file {file_path}: expected dict, got {type(data).__name__}")

    catalog = _load_from_dict(data)
    logger.debug(
        "Loaded catalog %s: %d models, %d embedding models, %d web search tools",
        file_path,
        len(catalog.models),
        len(catalog.embedding_models),
        len(catalog.web_search_tools),
    )
    return catalog


def _load_from_dict(data: dict) -> Catalog:
    """
    Construct Catalog from a dict.

    Raises:
        ValueError: If required fields are missing or have invalid types
    """
    providers_data = data.get("providers")
    if not isinstance(providers_data, list) or not providers_data:
        raise ValueError("Catalog 'providers' must be a non-empty list")

    providers: list[Provider] = []
    models: list[Model] = []
    embedding_models: list[EmbeddingModel] = []
    web_search_tools: list[WebSearchTool] = []

    for index, entry in enumerate(providers_data, start=1):
        if not isinstance(entry, dict):
            raise ValueError(f"Provider entry {index} must be a dict, got {type(entry).__name__}")
        provider = Provider(
            id=_get_int(entry, "id", default=_next_id(providers)),
            name=_get_str(entry, "name"),
        )
        providers.append(provider)

        for item in _get_list(entry, "models", provider.name):
            models.append(_build_model(item, provider, default_id=_next_id(models)))
        for item in _get_list(entry, "embedding_models", provider.name):
            embedding_models.append(
                _build_embedding_model(item, provider, default_id=_next_id(embedding_models))
            )
        for item in _get_list(entry, "web_search_tools", provider.name):
            web_search_tools.append(
                _build_web_search_tool(item, provider, default_id=_next_id(web_search_tools))
            )

    _check_unique_ids("provider", providers)
    _check_unique_ids("model", models)
    _check_unique_ids("embedding model", embedding_models)
    _check_unique_ids("web search tool", web_search_tools)

    return Catalog(
        providers=tuple(providers),
        models=tuple(models),
        embedding_models=tuple(embedding_models),
        web_search_tools=tuple(web_search_tools),
    )


def _build_model(data: dict, provider: Provider, default_id: int) -> Model:
    name = _get_str(data, "name")
    category = data.get("category", "standard")
    if category not in MODEL_CATEGORIES:
        raise ValueError(
            f"Model '{name}': 'category' must be one of {', '.join(MODEL_CATEGORIES)}, got {category!r}"
        )
    max_context_length = data.get("max_context_length")
    if max_context_length is not None and not isinstance(max_context_length, int):
        raise ValueError(
            f"Model '{name}': 'max_context_length' must be an integer, "
            f"got {type(max_context_length).__name__}"
        )
    is_legacy = data.get("is_legacy", False)
    if not isinstance(is_legacy, bool):
        raise ValueError(f"Model '{name}': 'is_legacy' must be a boolean")

    return Model(
        id=_get_int(data, "id", default=default_id),
        provider_id=provider.id,
        provider_name=provider.name,
        name=name,
        category=category,
        input_price=_get_price(data, "input_price", name),
        output_price=_get_price(data, "output_price", name),
        cache_write_price=_get_optional_price(data, "cache_write_price", name),
        cache_read_price=_get_optional_price(data, "cache_read_price", name),
        max_context_length=max_context_length,
        is_legacy=is_legacy,
    )


def _build_embedding_model(data: dict, provider: Provider, default_id: int) -> EmbeddingModel:
    name = _get_str(data, "name")
    pricing_tier = data.get("pricing_tier", "online")
    if pricing_tier not in PRICING_TIERS:
        raise ValueError(
            f"Embedding model '{name}': 'pricing_tier' must be one of "
            f"{', '.join(PRICING_TIERS)}, got {pricing_tier!r}"
        )
    dimensions = data.get("dimensions")
    if dimensions is not None and not isinstance(dimensions, int):
        raise ValueError(f"Embedding model '{name}': 'dimensions' must be an integer")

    return EmbeddingModel(
        id=_get_int(data, "id", default=default_id),
        provider_id=provider.id,
        provider_name=provider.name,
        name=name,
        input_price=_get_price(data, "input_price", name),
        dimensions=dimensions,
        pricing_tier=pricing_tier,
    )


def _build_web_search_tool(data: dict, provider: Provider, default_id: int) -> WebSearchTool:
    name = _get_str(data, "name")
    notes = data.get("additional_pricing_notes")
    if notes is not None and not isinstance(notes, str):
        raise ValueError(f"Web search tool '{name}': 'additional_pricing_notes' must be a string")

    return WebSearchTool(
        id=_get_int(data, "id", default=default_id),
        provider_id=provider.id,
        provider_name=provider.name,
        name=name,
        price_per_k_calls=_get_price(data, "price_per_k_calls", name),
        additional_pricing_notes=notes,
    )


def _next_id(entities: list) -> int:
    return max((entity.id for entity in entities), default=0) + 1


def _check_unique_ids(kind: str, entities: list) -> None:
    seen: dict[int, str] = {}
    for entity in entities:
        if entity.id in seen:
            raise ValueError(
                f"Duplicate {kind} id {entity.id}: '{seen[entity.id]}' and '{entity.name}'"
            )
        seen[entity.id] = entity.name


def _get_list(data: dict, key: str, owner: str) -> list[dict]:
    items = data.get(key, [])
    if items is None:
        return []
    if not isinstance(items, list):
        raise ValueError(f"Provider '{owner}': '{key}' must be a list, got {type(items).__name__}")
    for item in items:
        if not isinstance(item, dict):
            raise ValueError(f"Provider '{owner}': every '{key}' entry must be a dict")
    return items


def _get_str(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        raise ValueError(f"Catalog entry '{key}' is required")
    if not isinstance(value, str):
        raise ValueError(f"Catalog entry '{key}' must be a string, got {type(value).__name__}")
    return value


def _get_int(data: dict, key: str, default: int) -> int:
    value = data.get(key, default)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Catalog entry '{key}' must be an integer, got {type(value).__name__}")
    return value


def _get_price(data: dict, key: str, owner: str) -> float:
    value = data.get(key)
    if value is None:
        raise ValueError(f"'{owner}': '{key}' is required")
    return _check_price(value, key, owner)


def _get_optional_price(data: dict, key: str, owner: str) -> float | None:
    value = data.get(key)
    if value is None:
        return None
    return _check_price(value, key, owner)


def _check_price(value: object, key: str, owner: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{owner}': '{key}' must be a number, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"'{owner}': '{key}' must be non-negative, got {value}")
    return float(value)
