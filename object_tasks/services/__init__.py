"""Service Layer — glue between request schemas and the core exercises."""
