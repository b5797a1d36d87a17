"""Display helpers shared by the API responses."""


def format_currency(amount: float) -> str:
    return f"${amount:.2f}"


def format_percentage(rate: float) -> str:
    """Decimal rate as a percentage string, e.g. 0.05 -> '5.00%'."""
    return f"{rate * 100.0:.2f}%"


def format_multiple(factor: float) -> str:
    return f"{factor:.2f}x"
