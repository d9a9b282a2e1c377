"""Core collection logic: models, path resolution and the pipeline."""
