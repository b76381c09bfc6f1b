"""Record Shop backend."""
