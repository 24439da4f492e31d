from __future__ import annotations

import re
from collections import Counter
from typing import Dict, List, Optional, Tuple

# (compound identifier, coefficient); None when the coefficient is symbolic
Participant = Tuple[str, Optional[int]]

_ARROWS = ("<=>", "=>", "<=", "->", "<-", "=")
_COEFFICIENT = re.compile(r"^(\d+)$")
_ELEMENT = re.compile(r"([A-Z][a-z]?)(\d*)")


def split_equation(equation: str) -> Tuple[str, str]:
    for arrow in _ARROWS:
        if arrow in equation:
            left, right = equation.split(arrow, 1)
            return left.strip(), right.strip()
    raise ValueError(f"No reaction arrow in equation: {equation}")


def _parse_side(side: str) -> List[Participant]:
    participants: List[Participant] = []
    for term in side.split(" + "):
        tokens = term.strip().split()
        if not tokens:
            continue
        if len(tokens) == 1:
            participants.append((tokens[0], 1))
            continue
        match = _COEFFICIENT.match(tokens[0])
        # "n C00001" or "(n+1) C00001" have no fixed coefficient
        participants.append((tokens[-1], int(match.group(1)) if match else None))
    return participants


def parse_equation(equation: str) -> Tuple[List[Participant], List[Participant]]:
    """Parse "2 C00001 + C00002 <=> C00003" into substrate and product participants."""
    left, right = split_equation(equation)
    return _parse_side(left), _parse_side(right)


def with_prefix(identifier: str, prefix: str) -> str:
    if ":" in identifier:
        return identifier
    return prefix + identifier


def strip_prefix(identifier: str) -> str:
    return identifier.split(":", 1)[1] if ":" in identifier else identifier


def count_atoms(formula: str) -> Counter:
    """Count atoms of a plain sum formula like "C6H12O6". Charges and hydrates are ignored."""
    counts: Counter = Counter()
    formula = formula.split(".")[0]
    for element, number in _ELEMENT.findall(formula):
        counts[element] += int(number) if number else 1
    return counts


def atom_balance(
    substrates: List[Participant],
    products: List[Participant],
    formulas: Dict[str, str],
) -> Optional[Dict[str, int]]:
    """Return the atom difference products minus substrates, or None if it cannot be computed.

    An empty dict means the equation is balanced.
    """
    totals: Counter = Counter()
    for participants, sign in ((substrates, -1), (products, 1)):
        for identifier, coefficient in participants:
            formula = formulas.get(strip_prefix(identifier))
            # polymers like "(C6H10O5)n" have no fixed atom count
            if not formula or coefficient is None or "(" in formula:
                return None
            for element, n in count_atoms(formula).items():
                totals[element] += sign * coefficient * n
    return {element: diff for element, diff in sorted(totals.items()) if diff != 0}
