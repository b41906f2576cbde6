"""ProviderSelectionPolicy: weighted random choice of an LLM backend."""

from __future__ import annotations

from collections.abc import Callable, Sequence


def select_provider(
    weights: Sequence[tuple[str, float]],
    rand: Callable[[], float],
    default: str,
) -> str:
    """Weighted random pick over providers in their enumeration order.

    1. Draw r from *rand* (expected in [0, 1)).
    2. Walk providers in order, accumulating weights.
    3. Return the first provider whose cumulative weight is >= r.
    4. If none matches (weights sum below r, or r is out of range),
       return *default*.

    Ties are resolved by enumeration order, so the first of two providers
    sharing a boundary wins.

    Args:
        weights: (name, weight) pairs in registry insertion order.
        rand: zero-argument random source.
        default: provider returned when no cumulative weight covers r.

    Returns:
        The chosen provider name.

    Raises:
        ValueError: if weights is empty.
    """
    if not weights:
        raise ValueError("Cannot select from an empty provider list")

    r = rand()
    cumulative = 0.0
    for name, weight in weights:
        cumulative += weight
        if r <= cumulative:
            return name

    return default


def fallback_candidates(names: Sequence[str], primary: str) -> list[str]:
    """Per-call attempt order: *primary* first, then the rest in registry order.

    Each provider appears at most once. An unregistered *primary* is ignored.
    """
    ordered = [primary] if primary in names else []
    ordered.extend(name for name in names if name != primary)
    return ordered
