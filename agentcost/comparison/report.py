"""
Markdown comparison report: side-by-side overview plus per-entry breakdown.
"""

from __future__ import annotations

from collections.abc import Sequence

from agentcost.comparison.entries import BASE_CONFIGURATION_LABEL, ComparisonEntry
from agentcost.estimation.data_model import Assumptions

LANGUAGE_NAMES = {"ja": "Japanese", "en": "English", "mixed": "Mixed"}
SAME_AS_MAIN = "(same as main model)"
PER_STAGE = "(per-stage models)"


def _usd(value: float, decimals: int = 2) -> str:
    return f"${value:.{decimals}f}"


def _auxiliary(a: Assumptions) -> str:
    if a.auxiliary_model_name:
        return a.auxiliary_model_name
    if any(name != a.model_name for name in a.stage_models.values()):
        return PER_STAGE
    return SAME_AS_MAIN


def _options(entry: ComparisonEntry) -> str:
    options = entry.result.assumptions.enabled_options
    return ", ".join(options) if options else BASE_CONFIGURATION_LABEL


def _overview_table(entries: Sequence[ComparisonEntry]) -> list[str]:
    headers = ["Item", *(f"Plan {i}" for i in range(1, len(entries) + 1))]
    rows: list[tuple[str, list[str]]] = [
        (
            "Main model",
            [f"{e.result.assumptions.model_name} ({e.result.assumptions.provider_name})" for e in entries],
        ),
        ("Auxiliary model", [_auxiliary(e.result.assumptions) for e in entries]),
        (
            "Monthly cost",
            [f"{_usd(e.result.monthly_cost_usd)} (incl. +{e.result.safety_margin_rate:g}% margin)" for e in entries],
        ),
        ("Annual cost", [_usd(e.result.annual_cost_usd) for e in entries]),
        ("Daily cost", [_usd(e.result.daily_cost_usd) for e in entries]),
        ("Cost per request", [_usd(e.result.cost_per_request, 6) for e in entries]),
        ("Requests/day", [f"{e.result.assumptions.daily_requests:,}" for e in entries]),
        ("Working days/month", [f"{e.result.assumptions.monthly_working_days} days" for e in entries]),
        ("Input chars", [f"{e.result.assumptions.max_input_chars:,} chars" for e in entries]),
        ("Output chars", [f"{e.result.assumptions.max_output_chars:,} chars" for e in entries]),
        ("Enabled options", [_options(e) for e in entries]),
    ]

    lines = [
        "## Overview",
        "",
        f"| {' | '.join(headers)} |",
        f"| {' | '.join('---' for _ in headers)} |",
    ]
    for label, values in rows:
        lines.append(f"| {label} | {' | '.join(values)} |")
    lines.append("")
    return lines


def _entry_section(index: int, entry: ComparisonEntry) -> list[str]:
    result = entry.result
    a = result.assumptions
    lines = [
        f"## Plan {index}: {entry.label}",
        "",
        "### Assumptions",
        "",
        f"- Main model: {a.model_name} ({a.provider_name})",
        f"- Auxiliary model: {_auxiliary(a)}",
        f"- Requests/day: {a.daily_requests:,}",
        f"- Working days/month: {a.monthly_working_days} days",
        f"- Max input: {a.max_input_chars:,} chars",
        f"- Max output: {a.max_output_chars:,} chars",
        f"- Language: {LANGUAGE_NAMES.get(a.language, a.language)}",
        f"- System prompt: {a.system_prompt_chars:,} chars",
        f"- Average turns: {a.avg_turns_per_session}",
        f"- Safety margin: {a.safety_margin_percent:g}%",
    ]
    if a.enabled_options:
        lines.append(f"- Enabled options: {', '.join(a.enabled_options)}")
    for stage, model_name in a.stage_models.items():
        lines.append(f"- {stage} model: {model_name}")
    if a.embedding_model_name:
        lines.append(f"- Embedding model: {a.embedding_model_name}")
    if a.web_search_tool_name:
        lines.append(f"- Web search tool: {a.web_search_tool_name}")
    lines += [
        "",
        "### Cost summary",
        "",
        f"- Monthly cost: {_usd(result.monthly_cost_usd)} (incl. +{result.safety_margin_rate:g}% safety margin)",
        f"- Monthly cost (before margin): {_usd(result.monthly_cost_before_margin)}",
        f"- Annual cost: {_usd(result.annual_cost_usd)}",
        f"- Daily cost: {_usd(result.daily_cost_usd)}",
        f"- Total per request: {_usd(result.cost_per_request, 6)}",
    ]
    if result.long_context_surcharge:
        lines.append("- Note: long-context surcharge applied")
    if result.reembedding is not None and result.reembedding.cost_usd > 0:
        lines.append(f"- Re-embedding (monthly, not included above): {_usd(result.reembedding.cost_usd)}")
    lines += [
        "",
        "### Cost breakdown (per step, monthly)",
        "",
        "| Step | Purpose | Model | Input tokens | Output tokens | Monthly cost |",
        "| --- | --- | --- | --- | --- | --- |",
    ]

    # Each step's share of the monthly total
    monthly_multiplier = (
        result.monthly_cost_usd / result.cost_per_request if result.cost_per_request > 0 else 0
    )
    for step in result.steps:
        lines.append(
            f"| {step.name} | {step.description or '-'} | {step.model_name or '-'} "
            f"| {step.input_tokens:,} | {step.output_tokens:,} "
            f"| {_usd(step.cost_usd * monthly_multiplier)} |"
        )
    lines.append("")
    return lines


def generate_comparison_markdown(entries: Sequence[ComparisonEntry]) -> str:
    """
    Render a factual markdown report for comparison entries.

    The overview table is only emitted for two or more entries.
    """
    lines = ["# LLM running cost comparison", ""]

    if len(entries) >= 2:
        lines += _overview_table(entries)

    for index, entry in enumerate(entries, start=1):
        lines += _entry_section(index, entry)

    return "\n".join(lines)
