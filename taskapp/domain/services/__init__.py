"""Pure domain services: authorization rules and lifecycle transitions."""
