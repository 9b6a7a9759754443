"""Command builders for the mutating kubectl-mtv server."""
