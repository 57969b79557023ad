"""
Application package initializer.

The API is split into ``core`` (configuration, security, database and
logging), ``api`` (route definitions), ``services`` (one class per
collection plus the mailer) and ``schemas`` (pydantic payloads).  The
assembled FastAPI instance is re-exported here as ``app``.
"""

from .main import app  # noqa: F401
