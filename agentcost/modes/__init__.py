"""Calculator input modes: simple/detailed inputs, presets, mode adapter, scenarios and CostCalculator."""

from agentcost.modes.assumptions import build_assumptions
from agentcost.modes.calculator import CostCalculator
from agentcost.modes.data_model import (
    DetailedModeInput,
    SimpleModeInput,
    TextLengthPreset,
    UseCasePreset,
    UseCaseType,
)
from agentcost.modes.presets import (
    INPUT_LENGTH_PRESETS,
    OUTPUT_LENGTH_PRESETS,
    SIMPLE_MODE_DEFAULTS,
    USE_CASE_PRESETS,
    SimpleModeDefaults,
)
from agentcost.modes.scenario_loader import (
    Scenario,
    load_scenario,
    load_system_prompt_estimation,
)
from agentcost.modes.simple import convert_simple_to_detailed

__all__ = [
    "CostCalculator",
    "DetailedModeInput",
    "INPUT_LENGTH_PRESETS",
    "OUTPUT_LENGTH_PRESETS",
    "SIMPLE_MODE_DEFAULTS",
    "Scenario",
    "SimpleModeDefaults",
    "SimpleModeInput",
    "TextLengthPreset",
    "USE_CASE_PRESETS",
    "UseCasePreset",
    "UseCaseType",
    "build_assumptions",
    "convert_simple_to_detailed",
    "load_scenario",
    "load_system_prompt_estimation",
]
