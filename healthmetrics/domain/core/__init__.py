"""Core domain: value objects, exceptions and ports."""
