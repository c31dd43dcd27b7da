"""
Tests for CLI: estimate, compare and prompt-size commands, output handling, error cases.
"""

import json
import subprocess
import sys
import tempfile
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
EXAMPLES_DIR = REPO_ROOT / "examples"
CATALOG = str(EXAMPLES_DIR / "catalog.yaml")
SIMPLE_SCENARIO = str(EXAMPLES_DIR / "scenarios" / "support_bot_simple.yaml")
DETAILED_SCENARIO = str(EXAMPLES_DIR / "scenarios" / "knowledge_search_detailed.yaml")
WEB_SCENARIO = str(EXAMPLES_DIR / "scenarios" / "research_assistant_detailed.yaml")


def _run_cli(args: list[str]) -> tuple[int, str, str]:
    """
    Run CLI command and return (exit_code, stdout, stderr).

    Args:
        args: CLI arguments (without 'agentcost' command)
    """
    cmd = [sys.executable, "-m", "agentcost.cli"] + args
    result = subprocess.run(
        cmd, capture_output=True, text=True, encoding="utf-8", cwd=REPO_ROOT
    )
    return result.returncode, result.stdout, result.stderr


def test_cli_estimate_simple_scenario():
    exit_code, stdout, stderr = _run_cli(["estimate", SIMPLE_SCENARIO, "--catalog", CATALOG])
    assert exit_code == 0, stderr
    data = json.loads(stdout)
    assert data["schema_version"] == "1.0"
    assert data["label"] == "Support bot (rough estimate)"
    assert data["assumptions"]["model_name"] == "Claude Sonnet 4.5"
    assert data["assumptions"]["auxiliary_model_name"] == "Claude Haiku 4.5"
    assert data["monthly_cost_usd"] > 0
    months = data["growth_projection"]["projections"]
    assert len(months) == 12
    assert months[11]["multiplier"] == 3.0


def test_cli_estimate_detailed_scenario():
    exit_code, stdout, stderr = _run_cli(["estimate", DETAILED_SCENARIO, "--catalog", CATALOG])
    assert exit_code == 0, stderr
    data = json.loads(stdout)
    assert data["assumptions"]["system_prompt_chars"] == 3100
    assert data["assumptions"]["auxiliary_model_name"] == "GPT-4.1 nano"
    assert data["reembedding"]["cost_usd"] > 0
    names = [step["name"] for step in data["steps"]]
    assert "Semantic search" in names
    assert "Prompt caching" in data["assumptions"]["enabled_options"]


def test_cli_estimate_output_file():
    with tempfile.TemporaryDirectory() as tmp:
        out = Path(tmp) / "result.json"
        exit_code, stdout, _ = _run_cli(
            ["estimate", WEB_SCENARIO, "--catalog", CATALOG, "--output", str(out)]
        )
        assert exit_code == 0
        assert stdout == ""
        data = json.loads(out.read_text(encoding="utf-8"))
        assert "growth_projection" not in data
        assert data["steps"][-1]["name"] in ("Main agent", "Sub-agent")


def test_cli_compare():
    exit_code, stdout, stderr = _run_cli(
        ["compare", DETAILED_SCENARIO, WEB_SCENARIO, "--catalog", CATALOG]
    )
    assert exit_code == 0, stderr
    assert stdout.startswith("# LLM running cost comparison")
    assert "## Overview" in stdout
    assert "## Plan 1: Internal knowledge search" in stdout
    assert "## Plan 2: Research assistant with web search" in stdout


def test_cli_compare_duplicate_scenario():
    """Identical assumptions are reported once, with a warning."""
    exit_code, stdout, stderr = _run_cli(
        ["compare", DETAILED_SCENARIO, DETAILED_SCENARIO, "--catalog", CATALOG]
    )
    assert exit_code == 1
    assert "Warning" in stderr
    assert "## Plan 2" not in stdout


_SEARCH_SCENARIO = (
    "main_model_id: 4\ndaily_requests: 100\nmonthly_working_days: 20\n"
    "max_input_chars: 1000\nmax_output_chars: 1000\n"
    "semantic_search_enabled: true\nsearch_chunk_count: 5\nsearch_chunk_size: 500\n"
)


def test_cli_compare_keeps_scenarios_differing_in_reranking():
    """A scenario that only adds reranking is a different plan, not a duplicate."""
    with tempfile.TemporaryDirectory() as tmp:
        plain = Path(tmp) / "plain.yaml"
        plain.write_text("label: Plain search\n" + _SEARCH_SCENARIO)
        reranked = Path(tmp) / "reranked.yaml"
        reranked.write_text("label: Reranked search\n" + _SEARCH_SCENARIO + "reranking_enabled: true\n")
        exit_code, stdout, stderr = _run_cli(
            ["compare", str(plain), str(reranked), "--catalog", CATALOG]
        )
        assert exit_code == 0, stderr
        assert "Warning" not in stderr
        assert "## Plan 1: Plain search" in stdout
        assert "## Plan 2: Reranked search" in stdout
        assert "- Re-ranking model: GPT-4.1 nano" in stdout


def test_cli_prompt_size():
    exit_code, stdout, _ = _run_cli(["prompt-size", str(EXAMPLES_DIR / "prompt_factors.yaml")])
    assert exit_code == 0
    assert json.loads(stdout) == {"system_prompt_chars": 6300}


def test_cli_missing_scenario():
    exit_code, _, stderr = _run_cli(["estimate", "/nonexistent.yaml", "--catalog", CATALOG])
    assert exit_code == 1
    assert "Error" in stderr


def test_cli_unknown_model():
    with tempfile.TemporaryDirectory() as tmp:
        scenario = Path(tmp) / "bad.yaml"
        scenario.write_text(
            "main_model_id: 999\ndaily_requests: 10\nmonthly_working_days: 20\n"
            "max_input_chars: 100\nmax_output_chars: 100\n"
        )
        exit_code, _, stderr = _run_cli(["estimate", str(scenario), "--catalog", CATALOG])
        assert exit_code == 1
        assert "999" in stderr


def test_cli_no_command():
    exit_code, _, _ = _run_cli([])
    assert exit_code == 1
