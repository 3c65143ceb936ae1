# csp/choices.py
import random
from typing import Dict, List, Optional

from csp.colors import ALL_COLORS, Color, palette


class NoLegalColor(RuntimeError):
    """Raised when sampling from a ChoiceSet that has no legal color left."""


class ChoiceSet:
    """
    Legal colors of one node during a solving attempt.
    One flag per color; flags only ever go from legal to illegal.
    """

    __slots__ = ("_legal",)

    def __init__(self, budget: int):
        allowed = palette(budget)
        self._legal = [c in allowed for c in ALL_COLORS]

    def copy(self) -> "ChoiceSet":
        other = ChoiceSet.__new__(ChoiceSet)
        other._legal = list(self._legal)
        return other

    def remove(self, color: Color) -> None:
        self._legal[color.value] = False

    def allows(self, color: Color) -> bool:
        return self._legal[color.value]

    def amount(self) -> int:
        return sum(self._legal)

    def stuck(self) -> bool:
        return not any(self._legal)

    def legal_colors(self) -> List[Color]:
        return [c for c in ALL_COLORS if self._legal[c.value]]

    def first(self) -> Optional[Color]:
        for c in ALL_COLORS:
            if self._legal[c.value]:
                return c
        return None

    def sample_one(self, rng: random.Random) -> Color:
        legal = self.legal_colors()
        if not legal:
            raise NoLegalColor("no legal color left to sample")
        return rng.choice(legal)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ChoiceSet):
            return NotImplemented
        return self._legal == other._legal

    def __repr__(self) -> str:
        names = ",".join(str(c) for c in self.legal_colors())
        return f"ChoiceSet({names or '-'})"


def choices_for(G, node: int, coloring: Dict[int, Color], budget: int) -> ChoiceSet:
    """ChoiceSet of `node` given the colors its neighbors currently hold."""
    choices = ChoiceSet(budget)
    for u in G.neighbors(node):
        c = coloring.get(u)
        if c is not None:
            choices.remove(c)
    return choices
