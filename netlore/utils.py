"""Small string helpers shared across the package."""

INDENT = "    "


def gen_spacing(spacing_amount: int) -> str:
    """Return ``spacing_amount`` levels of four-space indentation."""
    return INDENT * max(spacing_amount, 0)