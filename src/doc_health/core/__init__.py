"""Configuration and document access shared by every scan."""
