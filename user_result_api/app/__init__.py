"""
Application package.

``main`` builds the FastAPI app; ``core`` holds the ``Result`` type,
settings and logging setup; ``services`` contains the user store and
business logic; ``api`` maps HTTP requests onto services and service
results back onto HTTP responses.
"""

from .main import app  # noqa: F401
