"""Utility modules for lazypanes."""
