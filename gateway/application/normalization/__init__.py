"""Normalization use cases."""
