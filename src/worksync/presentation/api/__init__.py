"""FastAPI presentation layer for WorkSync."""
