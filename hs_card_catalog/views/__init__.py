from .components import card_component, error_page, index_page, render, results_page

__all__ = ["card_component", "error_page", "index_page", "render", "results_page"]
