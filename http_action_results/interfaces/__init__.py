"""
Interfaces layer package.

Contains the controller base, the routing decorator, FastAPI routers
and Pydantic response schemas. Routes build results and return them.
"""
