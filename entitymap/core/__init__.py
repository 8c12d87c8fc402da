"""Ports and use cases around the conversion engine."""
