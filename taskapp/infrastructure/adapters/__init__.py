"""Adapters implementing application ports."""
