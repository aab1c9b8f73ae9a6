"""Chainable builders of Tailwind CSS classes for state and selection components, plus text helpers."""

__version__ = "0.1.0"