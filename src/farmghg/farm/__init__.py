"""Farm input model and loaders."""
