"""Constants for configuration loading (private)."""

DEFAULT_BASE_DIR = "."
DEFAULT_PREFIX = "/"
DEFAULT_OUTPUT_SUFFIX = ".out.md"
DEFAULT_IGNORE_PATTERNS = [
    ".git",
    ".github",
    ".vscode",
    ".idea",
    ".env",
    "node_modules",
    ".obsidian",
    "*.out.md",
]

# Field name -> environment keys, later keys win
ENV_KEYS: dict[str, tuple[str, ...]] = {
    "input_file": ("LINKLORE_INPUT_FILE",),
    "output_file": ("LINKLORE_OUTPUT_FILE",),
    "base_dir": ("LINKLORE_BASE_DIR",),
    "prefix": ("LINKLORE_PREFIX", "LINKLORE_BASE_URL"),
    "ignore_patterns": ("LINKLORE_IGNORE",),
    "force": ("LINKLORE_FORCE",),
}
