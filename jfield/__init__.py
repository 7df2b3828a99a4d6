"""Read and write JSON fields by dot/bracket path."""
