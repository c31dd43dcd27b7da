"""
Monthly extrapolation: scale per-request cost by traffic, apply safety margin and FX rate.
"""

from __future__ import annotations

from agentcost.estimation.data_model import MonthlyCost

MONTHS_PER_YEAR = 12


def calc_monthly_cost(
    cost_per_request: float,
    daily_requests: int,
    monthly_working_days: int,
    safety_margin_percent: float,
    exchange_rate: float,
) -> MonthlyCost:
    """
    Extrapolate a per-request USD cost to daily, monthly and annual cost.

    Args:
        cost_per_request: USD per request
        daily_requests: Requests per working day
        monthly_working_days: Working days per month
        safety_margin_percent: Uplift applied to the raw monthly cost (e.g. 20 for +20%)
        exchange_rate: JPY per USD

    Returns:
        MonthlyCost; monthly_cost_usd includes the margin, monthly_cost_before_margin does not.
    """
    daily_cost_usd = cost_per_request * daily_requests
    monthly_cost_before_margin = daily_cost_usd * monthly_working_days
    monthly_cost_usd = monthly_cost_before_margin * (1 + safety_margin_percent / 100)
    annual_cost_usd = monthly_cost_usd * MONTHS_PER_YEAR

    return MonthlyCost(
        daily_cost_usd=daily_cost_usd,
        monthly_cost_before_margin=monthly_cost_before_margin,
        monthly_cost_usd=monthly_cost_usd,
        monthly_cost_jpy=monthly_cost_usd * exchange_rate,
        annual_cost_usd=annual_cost_usd,
        annual_cost_jpy=annual_cost_usd * exchange_rate,
    )
