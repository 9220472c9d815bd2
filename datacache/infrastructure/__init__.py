"""Infrastructure layer: concrete providers."""
