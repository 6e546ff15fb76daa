"""HTTP API layer: routers, dependency injection and application factory."""
