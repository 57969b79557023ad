"""Configuration, security, logging and database plumbing."""
