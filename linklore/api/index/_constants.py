"""Constants for the directory index (private)."""

# Hard ceiling on indexable files per run
MAX_INDEX_FILES = 10_000
