"""Kernel – errors, redaction engine, containers and identifier types."""
