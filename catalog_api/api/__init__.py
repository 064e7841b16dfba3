"""HTTP API for the catalog."""
