"""
Quote store module for the quote service.
Holds the immutable quote set and its read-only query operations.
"""

from .models import Quote
from .quotes import DEFAULT_QUOTES
from .operations import QuoteStore

__all__ = ['models', 'quotes', 'operations', 'Quote', 'DEFAULT_QUOTES', 'QuoteStore']
