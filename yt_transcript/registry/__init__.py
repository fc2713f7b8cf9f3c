"""Node registration."""
