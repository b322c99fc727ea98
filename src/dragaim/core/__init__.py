"""Core infrastructure: configuration, errors, logging and timekeeping."""
