"""FastAPI routers and app wiring for vibeset."""
