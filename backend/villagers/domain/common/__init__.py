"""Cross-context domain primitives: errors, query tree, unit of work."""
