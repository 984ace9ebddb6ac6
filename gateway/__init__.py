"""
Response Envelope Gateway.

Application package root. A response-normalization layer for an HTTP
gateway, organized with hexagonal architecture (ports & adapters).

Bounded contexts:
    - normalization: Status classification, envelope composition,
      upstream error body parsing.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases orchestrating the domain services.
    - infrastructure: Adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (middleware, errors, logging).
"""
