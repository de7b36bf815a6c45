"""
API module for the quote service.
Provides the FastAPI-based HTTP/JSON interface to the quote store.
"""

__all__ = ['app', 'routes', 'models', 'middleware']
