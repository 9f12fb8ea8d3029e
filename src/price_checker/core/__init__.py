"""Core application infrastructure: configuration, events and exceptions."""
