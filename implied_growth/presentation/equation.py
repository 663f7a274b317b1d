"""Solved equation with the user's values substituted, as LaTeX and as speech"""

from dataclasses import dataclass

from implied_growth.domain.models import GrowthMetrics, ModelVariant
from implied_growth.presentation.formatting import format_currency, format_percentage

# Colors: growth green, return purple, dividends blue, price orange
GROWTH_COLOR = "#15803d"
RETURN_COLOR = "#7a46ff"
DIVIDEND_COLOR = "#3c6ae5"
PRICE_COLOR = "#b95b1d"


@dataclass(frozen=True)
class RenderedEquation:
    latex: str
    announcement: str


def _latex_escape(text: str) -> str:
    return text.replace("$", "\\$").replace("%", "\\%")


def render_equation(metrics: GrowthMetrics) -> RenderedEquation:
    """
    Render g = r - Div/PV with numbers substituted.

    The closed-form variant shows Div_t(1+g) in the numerator; the direct-D1
    variant shows the supplied Div_{t+1}.
    """
    inputs = metrics.inputs
    g_text = format_percentage(metrics.growth.implied_growth)
    r_text = format_percentage(inputs.required_return)
    price_text = format_currency(inputs.market_price)

    if metrics.variant is ModelVariant.DIRECT_D1:
        dividend_text = format_currency(inputs.expected_dividend)
        numerator = f"\\color{{{DIVIDEND_COLOR}}}{{{_latex_escape(dividend_text)}}}"
        spoken_dividend = f"expected next dividend {dividend_text}"
    else:
        dividend_text = format_currency(inputs.current_dividend)
        numerator = f"\\color{{{DIVIDEND_COLOR}}}{{{_latex_escape(dividend_text)}}}(1+g)"
        spoken_dividend = f"current dividend {dividend_text} times quantity 1 plus g"

    latex = (
        f"\\color{{{GROWTH_COLOR}}}{{g}} = "
        f"\\color{{{RETURN_COLOR}}}{{{_latex_escape(r_text)}}} - "
        f"\\frac{{{numerator}}}{{\\color{{{PRICE_COLOR}}}{{{_latex_escape(price_text)}}}}} = "
        f"\\color{{{GROWTH_COLOR}}}{{\\mathbf{{{_latex_escape(g_text)}}}}}"
    )

    announcement = (
        f"Implied growth rate equals {g_text}. "
        f"Formula: g equals required return {r_text} "
        f"minus {spoken_dividend}, divided by market price {price_text}."
    )

    return RenderedEquation(latex=latex, announcement=announcement)
