"""Versioned API routers and HTTP middleware."""
