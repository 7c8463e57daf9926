"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that unhandled errors
are consistently translated into server error responses.
"""
