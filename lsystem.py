"""
Lindenmayer system is a parallel rewriting system and a type of formal grammar.
It consists of an alphabet of symbols that can be used to make strings, a collection of production rules that expand
each symbol into some larger string of symbols.
The recursive nature of L system rules leads to self similarity and thereby fractal like forms are easy to describe
with an L system. Every preset in the catalog is one such grammar plus the numbers needed to fit it on a canvas.

Alphabet:
- Variables: symbols listed in `variables`, replaced by their rule on every round
- Constants: everything else (+, -, [, ] and drawing symbols that are not variables), copied unchanged

Rewriting Rules:
1. All variables of a generation are rewritten at once, left to right
2. A rule may be empty, in which case the symbol disappears on the next round
3. Round 0 is the axiom itself
4. The number of rounds is capped per definition (`max_iterations`) because the
   string grows exponentially with every round

Turtle Meaning (see fractal_turtle):
- F, A, B → Forward one stroke
- + / - → Turn by the definition's angle
- [ / ] → Save / restore the cursor
- Anything else → Ignored while drawing
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from fractal_errors import DefinitionError, IterationLimitExceeded


@dataclass(frozen=True)
class ViewScaling:
    """Where and how large a definition is drawn on the canvas.

    `initial_heading` is the canvas rotation in radians applied before drawing,
    `length_factor` scales the stroke length, `origin_x`/`origin_y` are the
    starting point as fractions of the canvas width/height.
    """
    initial_heading: float
    length_factor: float
    origin_x: float
    origin_y: float


@dataclass(frozen=True)
class FractalDefinition:
    name: str
    variables: str
    axiom: str
    rules: Mapping[str, str]
    angle: float
    max_iterations: int
    scaling: ViewScaling = field(repr=False)

    def __post_init__(self):
        # Read-only copy of the rule table
        object.__setattr__(self, 'rules', MappingProxyType(dict(self.rules)))

    def is_variable(self, symbol: str) -> bool:
        return symbol in self.variables

    def rule_for(self, symbol: str) -> str:
        try:
            return self.rules[symbol]
        except KeyError:
            raise DefinitionError(
                f"{self.name}: variable {symbol!r} has no rewriting rule"
            ) from None

    def expand(self, iterations: int) -> str:
        return expand(self, iterations)


def check_iterations(definition: FractalDefinition, iterations: int) -> None:
    if iterations < 0 or iterations > definition.max_iterations:
        raise IterationLimitExceeded(iterations, definition.max_iterations)


def check_definition(definition: FractalDefinition) -> None:
    """Raise DefinitionError if the definition could never expand cleanly."""
    if not definition.axiom:
        raise DefinitionError(f"{definition.name}: axiom is empty")
    if definition.max_iterations < 1:
        raise DefinitionError(f"{definition.name}: max_iterations must be at least 1")
    for symbol in definition.variables:
        definition.rule_for(symbol)


def expand(definition: FractalDefinition, iterations: int) -> str:
    check_iterations(definition, iterations)

    state = definition.axiom
    for _ in range(iterations):
        parts = []
        for ch in state:
            if definition.is_variable(ch):
                parts.append(definition.rule_for(ch))
            else:
                parts.append(ch)  # Constants pass through unchanged
        state = ''.join(parts)
    return state


def expansion_length(definition: FractalDefinition, iterations: int) -> int:
    """Length of expand(definition, iterations) without building the string."""
    check_iterations(definition, iterations)

    counts = {}
    for ch in definition.axiom:
        counts[ch] = counts.get(ch, 0) + 1

    for _ in range(iterations):
        next_counts = {}
        for ch, n in counts.items():
            produced = definition.rule_for(ch) if definition.is_variable(ch) else ch
            for out in produced:
                next_counts[out] = next_counts.get(out, 0) + n
        counts = next_counts
    return sum(counts.values())


__all__ = [
    'ViewScaling',
    'FractalDefinition',
    'check_iterations',
    'check_definition',
    'expand',
    'expansion_length',
]
