"""Domain layer: pure travel-time, catalog and template logic."""
