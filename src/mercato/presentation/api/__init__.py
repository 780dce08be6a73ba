"""HTTP API for the marketplace backend."""
