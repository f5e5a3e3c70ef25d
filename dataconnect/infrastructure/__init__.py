"""Infrastructure layer: settings, database wiring and concrete connectors."""
