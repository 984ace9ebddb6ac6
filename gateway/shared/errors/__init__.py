"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that domain errors raised by
downstream handlers become the upstream payloads the envelope
middleware knows how to normalize.
"""
