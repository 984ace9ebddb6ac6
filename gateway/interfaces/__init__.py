"""
Interfaces layer package.

FastAPI routers and Pydantic schemas exposed by the gateway host.
"""
