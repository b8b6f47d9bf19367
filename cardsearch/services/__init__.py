"""
cardsearch services.

Upstream search and result normalization.
"""

from cardsearch.services.search_engine import ScryfallSearchEngine

__all__ = ["ScryfallSearchEngine"]
