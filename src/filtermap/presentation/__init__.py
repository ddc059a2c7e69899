"""filtermap presentation layer: pytest plugin."""
