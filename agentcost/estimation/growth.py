"""
Growth projection: 12-month cost trajectory from a base monthly cost.
"""

from __future__ import annotations

from agentcost.estimation.data_model import AnnualProjection, GrowthScenario, MonthlyProjection

PROJECTION_MONTHS = 12

# Example multiplier curve: traffic tripling over the first year
GROWTH_PRESET_MULTIPLIERS: tuple[float, ...] = (1, 1, 1.2, 1.2, 1.5, 1.5, 2, 2, 2, 2.5, 2.5, 3)


def _month_multiplier(scenario: GrowthScenario, month: int) -> float:
    if scenario.mode == "multiplier":
        # Months without an explicit multiplier stay at the base cost
        if month - 1 < len(scenario.monthly_multipliers):
            return float(scenario.monthly_multipliers[month - 1])
        return 1.0
    return (1 + scenario.monthly_growth_rate / 100) ** (month - 1)


def calc_growth_projection(
    base_monthly_cost_usd: float,
    exchange_rate: float,
    scenario: GrowthScenario,
) -> AnnualProjection:
    """
    Project base_monthly_cost_usd over 12 months.

    - multiplier mode: month m costs base * monthly_multipliers[m-1]
    - monthlyRate mode: month m costs base * (1 + rate/100)^(m-1), so month 1
      always equals the base

    Cumulative cost is a running sum; totals equal the month-12 cumulative values.
    """
    projections: list[MonthlyProjection] = []
    cumulative_usd = 0.0

    for month in range(1, PROJECTION_MONTHS + 1):
        multiplier = _month_multiplier(scenario, month)
        monthly_cost_usd = base_monthly_cost_usd * multiplier
        cumulative_usd += monthly_cost_usd

        projections.append(
            MonthlyProjection(
                month=month,
                multiplier=multiplier,
                monthly_cost_usd=monthly_cost_usd,
                monthly_cost_jpy=monthly_cost_usd * exchange_rate,
                cumulative_cost_usd=cumulative_usd,
                cumulative_cost_jpy=cumulative_usd * exchange_rate,
            )
        )

    return AnnualProjection(
        projections=tuple(projections),
        total_annual_cost_usd=cumulative_usd,
        total_annual_cost_jpy=cumulative_usd * exchange_rate,
    )
