"""Versioned product lookup data."""
