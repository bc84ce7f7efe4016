"""Core configuration, logging and middleware."""
