"""Core: configuration, exception handlers, lifespan."""
