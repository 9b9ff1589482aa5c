"""Infrastructure layer: store adapters, security adapters, observability."""
