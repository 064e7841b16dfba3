"""Catalog API: in-memory product catalog service."""
