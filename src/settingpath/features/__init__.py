"""Feature slices: path resolution, snapshot adapter and the copy action."""
