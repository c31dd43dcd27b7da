"""
Comparison entries: a caller-held list of labelled CostResult snapshots.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from agentcost.estimation.data_model import Assumptions, CostResult

BASE_CONFIGURATION_LABEL = "Base configuration"


@dataclass(frozen=True)
class ComparisonEntry:
    id: str
    label: str
    result: CostResult
    created_at: str  # ISO 8601


def build_comparison_label(assumptions: Assumptions) -> str:
    """
    Build a label reflecting model, options, traffic and text lengths.

    Estimates computed under different conditions get different labels, so
    the label doubles as a duplicate key.
    """
    options = (
        "+".join(assumptions.enabled_options)
        if assumptions.enabled_options
        else BASE_CONFIGURATION_LABEL
    )
    return (
        f"{assumptions.model_name} - {options} "
        f"({assumptions.daily_requests}req, in {assumptions.max_input_chars:,}"
        f"/out {assumptions.max_output_chars:,} chars)"
    )


class ComparisonList:
    """In-memory comparison list; nothing is persisted."""

    def __init__(self) -> None:
        self._entries: list[ComparisonEntry] = []

    @property
    def entries(self) -> tuple[ComparisonEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, result: CostResult, label: str | None = None) -> ComparisonEntry:
        """Append result under label (built from its assumptions when None)."""
        entry = ComparisonEntry(
            id=str(uuid.uuid4()),
            label=label if label is not None else build_comparison_label(result.assumptions),
            result=result,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        self._entries.append(entry)
        return entry

    def contains_label(self, label: str) -> bool:
        return any(entry.label == label for entry in self._entries)

    def contains_assumptions(self, assumptions: Assumptions) -> bool:
        """True if an entry was computed from identical assumptions."""
        return any(entry.result.assumptions == assumptions for entry in self._entries)

    def remove(self, entry_id: str) -> None:
        """Remove the entry with entry_id; unknown ids are ignored."""
        self._entries = [entry for entry in self._entries if entry.id != entry_id]

    def clear(self) -> None:
        self._entries = []
