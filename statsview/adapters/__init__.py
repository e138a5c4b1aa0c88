"""Adapters implementing the domain ports (in-memory stubs for tests and offline use)."""
