"""Application layer: DTOs, repository ports, access and concurrency rules, use cases."""
