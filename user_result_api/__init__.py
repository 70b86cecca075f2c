"""
User Result API.

A small CRUD service for users in which expected failures travel as
``Result`` values instead of exceptions.  All functionality lives in
the ``app`` subpackage; the ASGI application is
``user_result_api.app.main:app``.
"""

__all__ = []
