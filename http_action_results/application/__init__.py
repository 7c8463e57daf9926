"""
Application layer package.

Helper functions that select and construct result objects.
"""
