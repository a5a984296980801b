"""Random number and logging helpers for twister-rng."""
