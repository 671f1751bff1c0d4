"""Core package: result types, configuration, constants, composition root."""
