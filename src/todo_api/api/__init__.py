"""FastAPI application and dependency wiring."""
