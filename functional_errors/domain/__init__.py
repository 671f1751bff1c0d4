"""Domain package: the Failure capability, causes, and context helpers."""
