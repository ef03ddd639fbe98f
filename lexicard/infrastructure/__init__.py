"""Infrastructure layer: adapters, routers and schemas."""
