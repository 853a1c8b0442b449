"""Infrastructure: persistence, security adapters."""
