"""Small helpers for file handling and YAML parsing."""
