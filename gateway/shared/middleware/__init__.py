"""
Shared middleware package.

Pure cross-cutting concerns applied to every response.
"""
