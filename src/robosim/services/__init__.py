"""Service layer: simulation loop and script checking."""
