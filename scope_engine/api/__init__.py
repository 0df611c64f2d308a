"""HTTP API for the scope engine."""
