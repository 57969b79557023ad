"""
Service layer.

Each service wraps the single database call behind an operation so that
API handlers never touch the Mongo collections directly.  The pymongo
driver blocks, so database services are synchronous and the endpoints
calling them are plain ``def`` functions run in FastAPI's threadpool.
"""
