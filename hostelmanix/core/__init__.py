"""Core cross-cutting components: exceptions, middleware and security."""
