"""Task sharing service: owned tasks, graded shares, optimistic concurrency."""
