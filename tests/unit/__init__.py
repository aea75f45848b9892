"""Unit tests (mocked dependencies, no database)."""
