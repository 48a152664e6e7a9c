"""Domain models, date helpers and input validation."""
