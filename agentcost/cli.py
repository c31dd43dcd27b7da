"""
agentcost CLI: command-line interface for monthly LLM cost estimation.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from agentcost.catalog import load_catalog
from agentcost.comparison import ComparisonList, build_comparison_label, generate_comparison_markdown
from agentcost.estimation import (
    CostResult,
    annual_projection_to_dict,
    calc_growth_projection,
    cost_result_to_dict,
    estimate_system_prompt_chars,
)
from agentcost.modes import (
    CostCalculator,
    Scenario,
    SimpleModeInput,
    load_scenario,
    load_system_prompt_estimation,
)

logger = logging.getLogger("agentcost")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_time=False, show_path=False)],
    )


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code: 0 on success, 1 on errors/warnings
    """
    parser = argparse.ArgumentParser(
        description="agentcost: monthly running cost estimator for multi-agent LLM applications"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # estimate command
    estimate_parser = subparsers.add_parser("estimate", help="Estimate the cost of one scenario")
    estimate_parser.add_argument("scenario", help="Scenario YAML file path")
    estimate_parser.add_argument("--catalog", required=True, help="Catalog YAML file path")
    estimate_parser.add_argument(
        "--output",
        help="Output JSON file path (default: print to stdout)",
    )

    # compare command
    compare_parser = subparsers.add_parser(
        "compare", help="Compare several scenarios as a markdown report"
    )
    compare_parser.add_argument("scenarios", nargs="+", help="Scenario YAML file paths")
    compare_parser.add_argument("--catalog", required=True, help="Catalog YAML file path")
    compare_parser.add_argument(
        "--output",
        help="Output markdown file path (default: print to stdout)",
    )

    # prompt-size command
    prompt_parser = subparsers.add_parser(
        "prompt-size", help="Estimate system prompt size from design factors"
    )
    prompt_parser.add_argument("factors", help="YAML file mapping factor names to levels")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    if args.command == "estimate":
        return _run_estimate(args.scenario, args.catalog, args.output)
    elif args.command == "compare":
        return _run_compare(args.scenarios, args.catalog, args.output)
    elif args.command == "prompt-size":
        return _run_prompt_size(args.factors)
    else:
        parser.print_help()
        return 1


def _write_output(text: str, output: str | None) -> None:
    if output:
        Path(output).write_text(text, encoding="utf-8")
    else:
        print(text)


def _calculate(calculator: CostCalculator, scenario: Scenario) -> CostResult:
    calculator_input = scenario.calculator_input
    if isinstance(calculator_input, SimpleModeInput):
        return calculator.calculate_simple(calculator_input)
    return calculator.calculate(calculator_input)


def _run_estimate(scenario_path: str, catalog_path: str, output: str | None) -> int:
    """
    Run the estimate command.

    Writes the CostResult as JSON, with a 12-month growth projection when the
    scenario defines one.
    """
    try:
        calculator = CostCalculator(load_catalog(catalog_path))
        scenario = load_scenario(scenario_path)
        result = _calculate(calculator, scenario)

        data = cost_result_to_dict(result)
        data["label"] = scenario.label
        if scenario.growth is not None:
            projection = calc_growth_projection(
                result.monthly_cost_usd, result.exchange_rate, scenario.growth
            )
            data["growth_projection"] = annual_projection_to_dict(projection)

        _write_output(json.dumps(data, indent=2, sort_keys=True), output)
        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _run_compare(scenario_paths: list[str], catalog_path: str, output: str | None) -> int:
    """
    Run the compare command.

    Scenarios whose assumptions duplicate an earlier one are skipped with a
    warning; warnings make the exit code 1.
    """
    try:
        calculator = CostCalculator(load_catalog(catalog_path))
        comparisons = ComparisonList()
        warnings: list[str] = []

        for path in scenario_paths:
            scenario = load_scenario(path)
            result = _calculate(calculator, scenario)
            key = build_comparison_label(result.assumptions)
            if comparisons.contains_assumptions(result.assumptions):
                warnings.append(f"{path}: identical to an earlier scenario ({key}), skipped")
                continue
            comparisons.add(result, label=scenario.label or key)

        _write_output(generate_comparison_markdown(comparisons.entries), output)

        for warning in warnings:
            print(f"Warning: {warning}", file=sys.stderr)
        return 1 if warnings else 0

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _run_prompt_size(factors_path: str) -> int:
    try:
        estimation = load_system_prompt_estimation(factors_path)
        chars = estimate_system_prompt_chars(estimation)
        logger.debug("Estimated system prompt from %d factors", len(estimation))
        print(json.dumps({"system_prompt_chars": chars}, indent=2, sort_keys=True))
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
