from curves3d.config import NUMBER_FORMAT


def format_number(value: float) -> str:
    """Render a float the way the report prints numbers (e.g. 1, 2.12132, 0)."""
    # Adding 0.0 turns -0.0 into 0.0
    return format(float(value) + 0.0, NUMBER_FORMAT)
