"""Product catalog: store, query pipeline and mutation operations."""
