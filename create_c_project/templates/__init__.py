"""Static template files copied verbatim into new projects."""
