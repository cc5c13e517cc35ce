"""
FastHTML components for the catalog's HTML pages.

Pages are rendered to strings with to_xml and returned by the FastAPI views;
the filter results themselves are rendered client-side by static/js/scripts.js.
"""

from typing import Iterable

from fasthtml.common import *

# Imported after the star import, which exports its own Card component
from ..models.card import Card

BOOTSTRAP_CSS = "https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css"
COST_OPTIONS = [str(cost) for cost in range(11)] + ["10+"]


def page(title: str, *content) -> FT:
    """Wrap content in the shared document layout."""
    return Html(
        Head(
            Meta(charset="utf-8"),
            Meta(name="viewport", content="width=device-width, initial-scale=1"),
            Title(title),
            Link(rel="stylesheet", href=BOOTSTRAP_CSS),
            Link(rel="stylesheet", href="/static/css/styles.css"),
        ),
        Body(
            Main(
                A(H1("Hearthstone Card Catalog"), href="/", cls="site-title"),
                *content,
                cls="container py-4"
            )
        ),
        lang="en"
    )


def search_form(query: str = "") -> FT:
    return Form(
        Div(
            Input(type="text", name="q", value=query, placeholder="Search cards by name...",
                  cls="form-control", id="searchInput"),
            Button("Search", type="submit", cls="btn btn-primary"),
            cls="input-group"
        ),
        action="/search",
        method="get",
        cls="mb-4"
    )


def _filter_select(label: str, name: str, select_id: str, options: Iterable[str] = ()) -> FT:
    return Div(
        Label(label, fr=select_id, cls="form-label"),
        Select(
            Option("Any", value=""),
            *[Option(option, value=option) for option in options],
            name=name,
            id=select_id,
            cls="form-select"
        ),
        cls="col-md-3"
    )


def filter_form() -> FT:
    """Filter form; set, type and class options are filled in by the browser script."""
    return Form(
        Div(
            _filter_select("Set", "set", "setSelect"),
            _filter_select("Type", "type", "typeSelect"),
            _filter_select("Class", "className", "classSelect"),
            _filter_select("Cost", "cost", "costSelect", COST_OPTIONS),
            cls="row g-3 mb-3"
        ),
        Button("Filter", type="submit", cls="btn btn-secondary"),
        id="filterForm",
        cls="mb-4"
    )


def card_component(card: Card) -> FT:
    """
    Render a single card.

    Args:
        card: Card to display

    Returns:
        FastHTML component
    """
    details = [
        Strong("Set:"), f" {card.set or ''}", Br(),
        Strong("Type:"), f" {card.type or ''}", Br(),
        Strong("Class:"), f" {card.card_class or ''}", Br(),
        Strong("Cost:"), f" {card.cost if card.cost is not None else ''}", Br(),
        Strong("Rarity:"), f" {card.rarity or ''}", Br(),
    ]
    if card.text:
        details += [Strong("Text:"), f" {card.text}", Br()]
    if card.flavor:
        details += [Strong("Flavor:"), f" {card.flavor}"]

    return Div(
        Div(
            H5(card.name or "", cls="card-title"),
            P(*details, cls="card-text"),
            cls="card-body"
        ),
        cls="card mb-3"
    )


def index_page() -> FT:
    return page(
        "Hearthstone Card Catalog",
        H2("Search"),
        search_form(),
        H2("Filter"),
        filter_form(),
        Div(id="results"),
        Script(src="/static/js/scripts.js"),
    )


def results_page(title: str, cards: Iterable[Card], query: str = "") -> FT:
    cards = list(cards)
    return page(
        title,
        search_form(query),
        H2(title),
        P(f"{len(cards)} card(s) found.", cls="text-muted"),
        Div(*[card_component(card) for card in cards], id="results"),
    )


def error_page(message: str) -> FT:
    return page(
        "Error",
        Div(message, cls="alert alert-warning", role="alert"),
        A("Back to home", href="/", cls="btn btn-link"),
    )


def render(component: FT) -> str:
    """Serialise a component tree to an HTML document string."""
    return to_xml(component)
