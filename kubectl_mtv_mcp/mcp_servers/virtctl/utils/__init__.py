"""Argument builders for the virtctl server tools, one module per tool family."""
