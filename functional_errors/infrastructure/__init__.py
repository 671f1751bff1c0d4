"""Infrastructure package: adapters for external libraries."""
