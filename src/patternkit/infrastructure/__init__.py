"""Technical infrastructure: logging and the singleton registry."""
