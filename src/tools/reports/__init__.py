"""Reports built from the run journal."""
