"""Shared helpers: logging setup and operator prompts."""
