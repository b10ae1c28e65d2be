"""Configuration, logging, errors, identifiers and the record store."""
