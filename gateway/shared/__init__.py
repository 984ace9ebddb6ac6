"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Response envelope middleware
- Error handling and mapping
- Logging configuration
"""
