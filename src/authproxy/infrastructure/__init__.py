"""Infrastructure layer: transport and trust store."""
