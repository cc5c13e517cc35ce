"""
Read-only queries over a catalog snapshot.

Every function takes the snapshot explicitly and keeps the snapshot's order in
its results. All text comparisons go through normalize().
"""

import re
from typing import Callable, Iterable, List, Optional

from ..exceptions import EmptyQuery, NoResults
from ..models.card import Card, CatalogSnapshot
from ..models.requests import COST_TEN_PLUS, FilterCriteria
from ..models.responses import CardFacets

CardPredicate = Callable[[Card], bool]

# Leading ASCII base-10 integer, e.g. "3" or " 3 mana"; anything else is ignored.
_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")


def normalize(value: Optional[str]) -> str:
    """Case-fold a field or criterion for comparison; None becomes ''"""
    return value.casefold() if value else ""


def _distinct_sorted(values: Iterable[Optional[str]]) -> List[str]:
    return sorted({value for value in values if value})


def list_facets(snapshot: CatalogSnapshot) -> CardFacets:
    """
    Collect the distinct set, type and class values present in a snapshot.

    Args:
        snapshot: Cards to inspect

    Returns:
        CardFacets with each list sorted ascending, empty values skipped
    """
    return CardFacets(
        sets=_distinct_sorted(card.set for card in snapshot),
        types=_distinct_sorted(card.type for card in snapshot),
        classes=_distinct_sorted(card.card_class for card in snapshot),
    )


def search_by_name(snapshot: CatalogSnapshot, query: Optional[str]) -> List[Card]:
    """
    Case-insensitive substring search on card names.

    Args:
        snapshot: Cards to search
        query: Search term from the user

    Returns:
        Matching cards in snapshot order

    Raises:
        EmptyQuery: If no search term was given
        NoResults: If the term matched no card
    """
    if not query or not query.strip():
        raise EmptyQuery()

    term = normalize(query)
    matches = [card for card in snapshot if card.name and term in normalize(card.name)]

    if not matches:
        raise NoResults()
    return matches


def _field_equals(attribute: str, wanted: str) -> CardPredicate:
    wanted = normalize(wanted)
    return lambda card: bool(getattr(card, attribute)) and normalize(getattr(card, attribute)) == wanted


def parse_cost_filter(cost: Optional[str]) -> Optional[CardPredicate]:
    """
    Turn a raw cost criterion into a predicate.

    Args:
        cost: "10+" for cost >= 10, otherwise a value starting with an integer

    Returns:
        Predicate on cards, or None when the value imposes no constraint
    """
    if not cost:
        return None
    if cost == COST_TEN_PLUS:
        return lambda card: card.cost is not None and card.cost >= 10

    match = _LEADING_INTEGER.match(cost)
    if match is None:
        return None
    exact = int(match.group(1))
    return lambda card: card.cost == exact


def filter_cards(snapshot: CatalogSnapshot, criteria: FilterCriteria) -> List[Card]:
    """
    Apply every given criterion (logical AND) to a snapshot.

    Args:
        snapshot: Cards to filter
        criteria: Optional set/type/class/cost constraints

    Returns:
        Matching cards in snapshot order; may be empty
    """
    predicates: List[CardPredicate] = []

    if criteria.set:
        predicates.append(_field_equals("set", criteria.set))
    if criteria.type:
        predicates.append(_field_equals("type", criteria.type))
    if criteria.class_name:
        predicates.append(_field_equals("card_class", criteria.class_name))

    cost_predicate = parse_cost_filter(criteria.cost)
    if cost_predicate is not None:
        predicates.append(cost_predicate)

    return [card for card in snapshot if all(predicate(card) for predicate in predicates)]
