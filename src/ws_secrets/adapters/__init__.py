"""Adapters – concrete implementations of the namespace ports."""
