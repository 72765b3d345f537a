"""Configuration, logging and persistence."""
