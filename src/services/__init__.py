"""Service layer for bookmark and API key operations."""
