"""
Quote Service Test Suite
========================

This package contains tests for the Quote Service including:
- Unit tests for the quote store, API layer and utilities
- Integration tests for the assembled HTTP application
"""
