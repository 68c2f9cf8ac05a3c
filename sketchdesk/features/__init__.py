"""Feature slices (domain + repository per feature)."""
