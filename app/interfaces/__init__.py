"""
Interfaces layer package.

Contains FastAPI routers and Pydantic request/response schemas.
Routes translate requests into commands, call use cases and
map results back to responses.
"""
