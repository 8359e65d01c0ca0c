"""Application-layer contracts shared by handlers and the runtime."""
