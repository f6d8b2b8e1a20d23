"""Application services (use cases) for departure boards."""
