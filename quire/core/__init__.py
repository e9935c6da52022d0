"""Core infrastructure: configuration, logging, exceptions, CLI helpers."""
