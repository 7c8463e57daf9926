"""
Infrastructure layer package.

Adapters turning result objects into framework responses.
"""
