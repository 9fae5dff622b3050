"""Product lookup table v1."""
