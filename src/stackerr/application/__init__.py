"""Application layer: construction, traversal, reconstruction, rendering."""
