"""
Column order resolution.

An ordering is either an explicit sequence of column titles or a
two-argument comparator over titles. Raw caller values are turned into
one of the two variants by coerce_order() before anything else happens.
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, TypeAlias

from cells.config.settings import CellsConfig, OrderPolicy
from cells.errors import ValidationError
from cells.utils.logging import get_logger

log = get_logger(__name__)

Comparator: TypeAlias = Callable[[Any, Any], int]


@dataclass(frozen=True)
class ExplicitOrder:
    """Column titles in the order they should appear (partial or full)."""

    titles: tuple[str, ...]

    def __post_init__(self) -> None:
        if isinstance(self.titles, (str, bytes)):
            msg = f"order can't be a bare string, got: {self.titles!r}"
            raise ValidationError(msg)
        if not isinstance(self.titles, Iterable):
            msg = f"titles must be a sequence of column titles, got {type(self.titles).__name__}"
            raise ValidationError(msg)
        object.__setattr__(self, "titles", tuple(self.titles))


@dataclass(frozen=True)
class ComparatorOrder:
    """Comparator used to sort the default column titles."""

    compare: Comparator

    def __post_init__(self) -> None:
        if not callable(self.compare):
            msg = f"comparator must be callable, got {type(self.compare).__name__}"
            raise ValidationError(msg)


OrderingSpec: TypeAlias = ExplicitOrder | ComparatorOrder


def coerce_order(order: Any) -> OrderingSpec | None:
    """
    Turn a caller-supplied ordering into an OrderingSpec.

    Args:
        order: None, an OrderingSpec, a comparator callable or an
            iterable of column titles.

    Returns:
        The matching OrderingSpec, or None when no ordering was given.

    Raises:
        ValidationError: If order is a bare string or not usable as an ordering.
    """
    if order is None:
        return None
    if isinstance(order, (str, bytes)):
        msg = f"order can't be a bare string, got: {order!r}"
        raise ValidationError(msg)
    if isinstance(order, (ExplicitOrder, ComparatorOrder)):
        return order
    if callable(order):
        return ComparatorOrder(order)
    if isinstance(order, Iterable):
        return ExplicitOrder(tuple(order))

    msg = f"order must be a comparator or a sequence of column titles, got {type(order).__name__}"
    raise ValidationError(msg)


def _apply_explicit(default_keys: Sequence[str], titles: tuple[str, ...]) -> list[str]:
    """Explicit titles first, then the remaining default keys if the list is short."""
    resolved: list[str] = []
    for title in titles:
        if title not in default_keys:
            msg = f"column title {title!r} is not in defaults"
            raise ValidationError(msg)
        resolved.append(title)

    if len(resolved) < len(default_keys):
        resolved.extend(key for key in default_keys if key not in resolved)

    return resolved


def _check_permutation(default_keys: Sequence[str], resolved: list[str]) -> None:
    """Raise if resolved is not an exact permutation of default_keys."""
    missing = [key for key in default_keys if key not in resolved]
    duplicated = sorted({key for key in resolved if resolved.count(key) > 1})
    if missing or duplicated:
        msg = (
            "column order must be a permutation of the default keys: "
            f"missing={missing}, duplicated={duplicated}"
        )
        raise ValidationError(msg)


def resolve_column_order(
    default_keys: Sequence[str],
    order: Any = None,
    *,
    config: CellsConfig | None = None,
) -> list[str]:
    """
    Resolve the final column order for a set of default keys.

    Without an ordering the default keys keep their insertion order. A
    comparator sorts them. An explicit list is used as given, and if it is
    shorter than the default keys the keys it does not mention follow in
    their original order. Duplicates in an explicit list are kept.

    Args:
        default_keys: Column titles from the defaults mapping.
        order: Raw ordering, see coerce_order().
        config: Optional configuration; controls the explicit order policy.

    Returns:
        Column titles in resolved order.

    Raises:
        ValidationError: If the ordering is a bare string, names a title that is
            not a default key, or (strict policy) is not a permutation.
    """
    config = config or CellsConfig()
    spec = coerce_order(order)
    default_keys = list(default_keys)

    if spec is None:
        resolved = default_keys
    elif isinstance(spec, ComparatorOrder):
        resolved = sorted(default_keys, key=cmp_to_key(spec.compare))
    else:
        resolved = _apply_explicit(default_keys, spec.titles)
        if config.order_policy is OrderPolicy.STRICT:
            _check_permutation(default_keys, resolved)

    log.debug("Resolved column order", columns=resolved)
    return resolved
