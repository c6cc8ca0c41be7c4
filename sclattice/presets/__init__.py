"""Packaged layout presets (YAML)."""
