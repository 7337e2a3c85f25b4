"""Use cases — glue between the CLI and the core services."""
