"""Shopping list consolidation, bucketing and generation."""
