"""Advisor API: investment profile onboarding and rule-based portfolio allocation."""

__version__ = "0.1.0"
