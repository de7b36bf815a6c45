"""
Built-in quote set served when no external quote file is configured.
"""

from typing import Tuple

from .models import Quote


DEFAULT_QUOTES: Tuple[Quote, ...] = (
    Quote(
        id=1,
        text="The only way to do great work is to love what you do.",
        author="Steve Jobs",
        category="inspiration",
    ),
    Quote(
        id=2,
        text="Life is what happens when you're busy making other plans.",
        author="John Lennon",
        category="life",
    ),
    Quote(
        id=3,
        text="The future belongs to those who believe in the beauty of their dreams.",
        author="Eleanor Roosevelt",
        category="motivation",
    ),
)
