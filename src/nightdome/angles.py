"""Small angle helpers shared by the compute modules."""


def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x


def wrap(x: float, period: float) -> float:
    """Fold x into [0, period)."""
    x = x % period
    # -1e-17 % 24.0 rounds to 24.0
    return 0.0 if x >= period else x


def wrap_hours(x: float) -> float:
    return wrap(x, 24.0)


def wrap_deg(x: float) -> float:
    return wrap(x, 360.0)
