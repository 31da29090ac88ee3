"""Core services: database access and the product catalog application service."""
