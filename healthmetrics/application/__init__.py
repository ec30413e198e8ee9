"""Application layer: queries running the metric pipelines."""
