"""
Normalization bounded context — domain layer.

Decides, for one finished HTTP exchange, whether the response body
passes through untouched or is replaced by a standard envelope:
- Status classification
- Envelope construction
- Upstream error body parsing
- Method-aware message composition
"""
