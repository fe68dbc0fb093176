"""General-purpose utilities: error state, allocators, array lists, char buffers, string, filesystem, environment and process helpers."""

__version__ = "0.1.0"