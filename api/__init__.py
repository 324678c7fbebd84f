"""HTTP adapter for the chess rules core."""
