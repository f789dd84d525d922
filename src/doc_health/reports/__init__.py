"""Report rendering (text and JSON) and the summarization guide."""
