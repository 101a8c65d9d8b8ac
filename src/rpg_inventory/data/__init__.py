"""Bundled data files: the item JSON Schema and the default inventory config."""
