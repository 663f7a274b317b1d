"""Display formatting for currency amounts and percentages"""


def format_currency(value: float, decimals: int = 2) -> str:
    """$1,234.56 style; negatives as -$100.00"""
    sign = "-" if value < 0 and round(abs(value), decimals) != 0 else ""
    return f"{sign}${abs(value):,.{decimals}f}"


def format_percentage(value: float, decimals: int = 2) -> str:
    """Value already in percent: 1.9048 -> 1.90%"""
    return f"{value:.{decimals}f}%"
