"""Static configuration tables for casktoken."""
