"""HTTP tests through the FastAPI application."""
