"""API layer - FastAPI application exposing registration and login."""
