"""Core normalization logic: models, recognizers and the batch stage."""
