"""Normalization adapters."""
