"""
Pydantic schema definitions for API payloads.

Documents are stored without an enforced schema, so request models only
name the fields the handlers read and let everything else through.
"""
