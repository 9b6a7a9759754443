"""Query builders for the read-only server."""
