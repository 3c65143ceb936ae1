# csp/colors.py
from enum import Enum
from typing import List, Tuple


class Color(Enum):
    RED = 0
    GREEN = 1
    BLUE = 2
    YELLOW = 3

    def __str__(self) -> str:
        return self.name.capitalize()


# fixed enumeration order; every tie-break in the solvers follows it
ALL_COLORS: Tuple[Color, ...] = tuple(Color)
BUDGETS: Tuple[int, ...] = (2, 3, 4)


def check_budget(budget: int) -> int:
    if budget not in BUDGETS:
        raise ValueError(f"color budget must be one of {BUDGETS}, got {budget!r}")
    return budget


def palette(budget: int) -> List[Color]:
    """Colors usable under `budget`: the first `budget` entries of (Red, Green, Blue, Yellow)."""
    return list(ALL_COLORS[:check_budget(budget)])
