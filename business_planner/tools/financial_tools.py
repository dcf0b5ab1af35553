"""Financial Tools - three-year projections and key metrics

The arithmetic lives in utils.financials; this module only renders it.
"""

import logging
from typing import TYPE_CHECKING

from ..schemas import FinancialProjectionsInput
from ..utils.financials import FinancialProjection, project
from ..utils.formatting import format_amount, format_plain

if TYPE_CHECKING:
    from ..registry import ToolRegistry

logger = logging.getLogger(__name__)

SUITE = "business-consultant"

BREAK_EVEN_FALLBACK = "Review pricing model"
ROI_FALLBACK = "N/A (no startup costs)"


def _money(value: float) -> str:
    return f"${format_amount(value)}"


def _break_even(p: FinancialProjection) -> str:
    return f"{p.break_even_months} months" if p.break_even_reachable else BREAK_EVEN_FALLBACK


def _roi(p: FinancialProjection) -> str:
    return ROI_FALLBACK if p.roi_1_year is None else f"{p.roi_1_year:.1f}%"


def render_financial_projections(p: FinancialProjection) -> str:
    return f"""# Financial Projections & Analysis

## 📊 Revenue Projections
- **Year 1**: {_money(p.year1_revenue)}
- **Year 2**: {_money(p.year2_revenue)} ({format_plain(p.growth_rate)}% growth)
- **Year 3**: {_money(p.year3_revenue)} (projected)

## 💸 Cost Structure
- **Initial Investment**: {_money(p.startup_costs)}
- **Monthly Operating Expenses**: {_money(p.monthly_expenses)}
- **Annual Operating Expenses**: {_money(p.year1_expenses)}

## 📈 Profitability Analysis
- **Year 1 Net Profit**: {_money(p.year1_profit)} ({format_plain(p.profit_margin)}% margin)
- **Year 2 Net Profit**: {_money(p.year2_profit)}
- **Year 3 Net Profit**: {_money(p.year3_profit)}

## ⏱️ Key Metrics
- **Monthly Net Cash Flow**: {_money(p.monthly_net_cash_flow)}
- **Break-even Point**: {_break_even(p)}
- **ROI (Year 1)**: {_roi(p)}
- **Cash Flow Positive**: Month {p.cash_flow_positive_month}

## 💡 Financial Recommendations
1. **Maintain** 3-6 months operating expenses as cash reserve ({_money(p.cash_reserve)})
2. **Monitor** monthly burn rate closely in first year
3. **Consider** revenue diversification strategies
4. **Plan** for seasonal variations in cash flow
5. **Explore** funding options before reaching 6-month runway
"""


def register_financial_tools(registry: "ToolRegistry") -> None:
    """Register the financial projection tool with the registry"""

    @registry.tool(
        "generate-financial-projections",
        title="Financial Projections Calculator",
        description="Generate detailed financial projections and key metrics for business planning",
        input_model=FinancialProjectionsInput,
        suite=SUITE,
    )
    def generate_financial_projections(params: FinancialProjectionsInput) -> str:
        """Revenue, cost, profitability and break-even report

        Year 2 revenue is projected from year 1 when not given (or 0);
        growth defaults to 15% and margin to 20%.

        Examples:
            registry.invoke("generate-financial-projections", {
                "startupCosts": 24000, "monthlyExpenses": 5000, "year1Revenue": 120000,
            })
            # ... Break-even Point**: 5 months ...
        """
        projection = project(
            startup_costs=params.startup_costs,
            monthly_expenses=params.monthly_expenses,
            year1_revenue=params.year1_revenue,
            year2_revenue=params.year2_revenue,
            growth_rate=params.industry_growth_rate,
            profit_margin=params.profit_margin,
        )
        if not projection.break_even_reachable:
            logger.debug("Monthly net cash flow is not positive; break-even unreachable")
        return render_financial_projections(projection)
