"""
Scenario loader: supports YAML files, dicts and Scenario instances.

A scenario file holds one calculator input plus optional label and growth
settings::

    label: Support bot
    mode: simple            # or "detailed"
    model_id: 4
    daily_requests: 500
    input_length_preset: medium
    output_length_preset: long
    use_case_type: customer_support
    growth:
      mode: monthlyRate
      monthly_growth_rate: 10

Detailed scenarios may give system_prompt_estimation (factor -> level)
instead of system_prompt_chars.
"""

from __future__ import annotations

import logging
from dataclasses import MISSING, dataclass, fields
from pathlib import Path

import yaml

from agentcost.estimation.data_model import (
    CURRENCIES,
    ESTIMATION_LEVELS,
    GROWTH_MODES,
    LANGUAGES,
    GrowthScenario,
)
from agentcost.estimation.system_prompt import ESTIMATION_FACTORS, estimate_system_prompt_chars
from agentcost.modes.data_model import (
    TEXT_LENGTH_PRESETS,
    USE_CASE_TYPES,
    DetailedModeInput,
    SimpleModeInput,
)

logger = logging.getLogger(__name__)

_SCENARIO_KEYS = ("label", "mode", "growth", "system_prompt_estimation")

_BOOL_FIELDS = frozenset(
    {
        "topic_classification",
        "orchestrator",
        "semantic_search_enabled",
        "reranking_enabled",
        "conversation_history",
        "history_compression",
        "web_search",
        "web_search_summarization",
        "prompt_caching",
    }
)
_FLOAT_FIELDS = frozenset({"classification_fallback_rate", "safety_margin", "exchange_rate"})
_OPTIONAL_INT_FIELDS = frozenset(
    {
        "auxiliary_model_id",
        "classification_model_id",
        "orchestrator_model_id",
        "sub_agent_model_id",
        "embedding_model_id",
        "reranking_model_id",
        "compression_model_id",
        "web_search_tool_id",
        "summarization_model_id",
        "custom_input_chars",
        "custom_output_chars",
    }
)
_CHOICE_FIELDS: dict[str, tuple[str, ...]] = {
    "language": LANGUAGES,
    "currency": CURRENCIES,
    "input_length_preset": TEXT_LENGTH_PRESETS,
    "output_length_preset": TEXT_LENGTH_PRESETS,
    "use_case_type": USE_CASE_TYPES,
}


@dataclass(frozen=True)
class Scenario:
    """One labelled calculator input with an optional growth scenario."""

    label: str | None
    calculator_input: SimpleModeInput | DetailedModeInput
    growth: GrowthScenario | None = None


def load_scenario(source: Scenario | str | Path | dict) -> Scenario:
    """
    Load a Scenario from various sources.

    Args:
        source: Can be:
            - Scenario instance: returned as-is
            - str or Path: treated as YAML file path
            - dict: constructed directly from dict keys

    Returns:
        Scenario instance

    Raises:
        FileNotFoundError: If source is a file path that doesn't exist
        ValueError: If fields are missing, unknown, negative or of the wrong type
        TypeError: If source has an unsupported type
    """
    if isinstance(source, Scenario):
        return source

    if isinstance(source, (str, Path)):
        file_path = Path(source)
        data = _read_yaml_dict(file_path)
        scenario = _load_from_dict(data)
        if scenario.label is None:
            scenario = Scenario(file_path.stem, scenario.calculator_input, scenario.growth)
        logger.debug("Loaded %s scenario from %s", type(scenario.calculator_input).__name__, file_path)
        return scenario

    if isinstance(source, dict):
        return _load_from_dict(source)

    raise TypeError(f"Unsupported source type for load_scenario: {type(source).__name__}")


def load_system_prompt_estimation(source: str | Path | dict) -> dict[str, str]:
    """
    Load a factor -> level mapping for the system prompt estimator.

    Raises:
        ValueError: If a factor or level is unknown
    """
    data = _read_yaml_dict(Path(source)) if isinstance(source, (str, Path)) else source
    if not isinstance(data, dict):
        raise ValueError(f"System prompt estimation must be a dict, got {type(data).__name__}")

    estimation: dict[str, str] = {}
    for factor, level in data.items():
        if factor not in ESTIMATION_FACTORS:
            raise ValueError(f"Unknown system prompt factor: {factor!r}")
        if level not in ESTIMATION_LEVELS:
            raise ValueError(
                f"System prompt factor {factor!r}: level must be one of "
                f"{', '.join(ESTIMATION_LEVELS)}, got {level!r}"
            )
        estimation[factor] = level
    return estimation


def _read_yaml_dict(file_path: Path) -> dict:
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML file {file_path}: {e}") from e
    if data is None:
        raise ValueError(f"YAML file {file_path} is empty")
    if not isinstance(data, dict):
        raise ValueError(f"YAML file {file_path}: expected dict, got {type(data).__name__}")
    return data


def _load_from_dict(data: dict) -> Scenario:
    label = data.get("label")
    if label is not None and not isinstance(label, str):
        raise ValueError(f"Scenario 'label' must be a string, got {type(label).__name__}")

    mode = data.get("mode", "detailed")
    fields_data = {key: value for key, value in data.items() if key not in _SCENARIO_KEYS}

    if mode == "simple":
        calculator_input: SimpleModeInput | DetailedModeInput = _build(SimpleModeInput, fields_data)
    elif mode == "detailed":
        if "system_prompt_estimation" in data:
            if "system_prompt_chars" in fields_data:
                raise ValueError(
                    "Scenario: give either 'system_prompt_chars' or 'system_prompt_estimation', not both"
                )
            estimation = load_system_prompt_estimation(data["system_prompt_estimation"])
            fields_data["system_prompt_chars"] = estimate_system_prompt_chars(estimation)
        calculator_input = _build(DetailedModeInput, fields_data)
    else:
        raise ValueError(f"Scenario 'mode' must be 'simple' or 'detailed', got {mode!r}")

    growth = _load_growth(data["growth"]) if data.get("growth") is not None else None
    return Scenario(label=label, calculator_input=calculator_input, growth=growth)


def _build(cls: type, data: dict):
    """Validate data against the fields of cls and construct it."""
    known = {f.name: f for f in fields(cls)}
    unknown = sorted(set(data) - set(known))
    if unknown:
        raise ValueError(f"Unknown {cls.__name__} field(s): {', '.join(unknown)}")

    kwargs = {}
    for name, f in known.items():
        if name not in data:
            if f.default is MISSING and f.default_factory is MISSING:
                raise ValueError(f"{cls.__name__} field '{name}' is required")
            continue
        kwargs[name] = _check_field(cls.__name__, name, data[name])
    return cls(**kwargs)


def _check_field(owner: str, name: str, value: object) -> object:
    if name in _BOOL_FIELDS:
        if not isinstance(value, bool):
            raise ValueError(f"{owner} '{name}' must be a boolean, got {type(value).__name__}")
        return value

    if name in _CHOICE_FIELDS:
        choices = _CHOICE_FIELDS[name]
        if value not in choices:
            raise ValueError(f"{owner} '{name}' must be one of {', '.join(choices)}, got {value!r}")
        return value

    if name in _OPTIONAL_INT_FIELDS and value is None:
        return None

    if name in _FLOAT_FIELDS:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{owner} '{name}' must be a number, got {type(value).__name__}")
        value = float(value)
    elif isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{owner} '{name}' must be an integer, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{owner} '{name}' must be non-negative, got {value}")
    return value


def _load_growth(data: object) -> GrowthScenario:
    if not isinstance(data, dict):
        raise ValueError(f"Scenario 'growth' must be a dict, got {type(data).__name__}")

    mode = data.get("mode", "multiplier")
    if mode not in GROWTH_MODES:
        raise ValueError(f"Growth 'mode' must be one of {', '.join(GROWTH_MODES)}, got {mode!r}")

    multipliers = data.get("monthly_multipliers", [])
    if not isinstance(multipliers, list) or len(multipliers) > 12:
        raise ValueError("Growth 'monthly_multipliers' must be a list of at most 12 numbers")
    for value in multipliers:
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise ValueError(f"Growth multiplier must be a non-negative number, got {value!r}")

    rate = data.get("monthly_growth_rate", 0.0)
    if isinstance(rate, bool) or not isinstance(rate, (int, float)):
        raise ValueError(f"Growth 'monthly_growth_rate' must be a number, got {type(rate).__name__}")

    return GrowthScenario(
        mode=mode,
        monthly_multipliers=tuple(float(value) for value in multipliers),
        monthly_growth_rate=float(rate),
    )
