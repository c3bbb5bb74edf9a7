"""Core building blocks: subprocess handling, paths, config and context."""
