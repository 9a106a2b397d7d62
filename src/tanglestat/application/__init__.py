"""Application layer: parser, analyzer, reporters."""
