"""Infrastructure layer: line sources backed by files and streams."""
