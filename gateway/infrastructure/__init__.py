"""
Infrastructure layer package.

Adapters implementing the domain ports. This is the only layer
allowed to depend on serialization libraries.
"""
