"""
Domain layer package.

Result value objects and the errors raised while building them.
No framework imports allowed.
"""
