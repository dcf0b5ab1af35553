"""
Financial projection formulas

Pure arithmetic over the caller's inputs; no rounding is applied until the
numbers are rendered.

    year2  = year2Revenue or year1 * (1 + growth/100)
    year3  = year2 * (1 + growth/100)
    profit = revenue * margin/100                    (each year)
    net    = year1/12 - monthlyExpenses
    breakEven = ceil(startupCosts / net) if net > 0 else -1
    roi    = (profit1 - startupCosts) / startupCosts * 100
"""

import math
from dataclasses import dataclass
from typing import Optional

DEFAULT_GROWTH_RATE = 15.0
DEFAULT_PROFIT_MARGIN = 20.0
# Months of operating expenses recommended as cash reserve
RESERVE_MONTHS = 4
BREAK_EVEN_UNREACHABLE = -1


@dataclass(frozen=True)
class FinancialProjection:
    """Derived three-year metrics for one set of inputs"""

    startup_costs: float
    monthly_expenses: float
    growth_rate: float
    profit_margin: float
    year1_revenue: float
    year2_revenue: float
    year3_revenue: float
    year1_expenses: float
    year1_profit: float
    year2_profit: float
    year3_profit: float
    monthly_revenue: float
    monthly_net_cash_flow: float
    break_even_months: int
    roi_1_year: Optional[float]
    cash_flow_positive_month: int
    cash_reserve: float

    @property
    def break_even_reachable(self) -> bool:
        return self.break_even_months > 0


def break_even_months(startup_costs: float, monthly_net_cash_flow: float) -> int:
    """Months to recover startup costs, or -1 when cash flow never turns positive"""
    if monthly_net_cash_flow > 0:
        return math.ceil(startup_costs / monthly_net_cash_flow)
    return BREAK_EVEN_UNREACHABLE


def first_year_roi(year1_profit: float, startup_costs: float) -> Optional[float]:
    """ROI in percent; None when there are no startup costs to return on"""
    if startup_costs == 0:
        return None
    return (year1_profit - startup_costs) / startup_costs * 100


def cash_flow_positive_month(break_even: int) -> int:
    """Two months before break-even (at least month 1); month 6 when unreachable"""
    return max(1, break_even - 2 if break_even > 0 else 6)


def project(
    startup_costs: float,
    monthly_expenses: float,
    year1_revenue: float,
    year2_revenue: Optional[float] = None,
    growth_rate: Optional[float] = None,
    profit_margin: Optional[float] = None,
) -> FinancialProjection:
    """Compute every derived metric

    A missing or zero year2_revenue is projected from year 1 with the growth
    rate. growth_rate and profit_margin default only when not given, so an
    explicit 0 is honoured.

    Example:
        p = project(24000, 5000, 120000)
        p.monthly_net_cash_flow  # 5000.0
        p.break_even_months      # 5
    """
    growth = DEFAULT_GROWTH_RATE if growth_rate is None else growth_rate
    margin = DEFAULT_PROFIT_MARGIN if profit_margin is None else profit_margin

    year2 = year2_revenue or year1_revenue * (1 + growth / 100)
    year3 = year2 * (1 + growth / 100)

    year1_profit = year1_revenue * (margin / 100)
    monthly_revenue = year1_revenue / 12
    net = monthly_revenue - monthly_expenses
    break_even = break_even_months(startup_costs, net)

    return FinancialProjection(
        startup_costs=startup_costs,
        monthly_expenses=monthly_expenses,
        growth_rate=growth,
        profit_margin=margin,
        year1_revenue=year1_revenue,
        year2_revenue=year2,
        year3_revenue=year3,
        year1_expenses=monthly_expenses * 12,
        year1_profit=year1_profit,
        year2_profit=year2 * (margin / 100),
        year3_profit=year3 * (margin / 100),
        monthly_revenue=monthly_revenue,
        monthly_net_cash_flow=net,
        break_even_months=break_even,
        roi_1_year=first_year_roi(year1_profit, startup_costs),
        cash_flow_positive_month=cash_flow_positive_month(break_even),
        cash_reserve=monthly_expenses * RESERVE_MONTHS,
    )
