"""
Configuration for the Monado tool.
"""

from pathlib import Path
from typing import Final

# --- File Paths ---
ROOT_DIR: Final[Path] = Path(__file__).parent.parent
EXAMPLES_FILE: Final[Path] = ROOT_DIR / "data" / "examples.json"

# --- Language Selection ---
SUPPORTED_LANGUAGES: Final[frozenset[str]] = frozenset(
    {"elixir", "haskell", "rust", "ocaml", "golang"}
)
DEFAULT_LANGUAGE: Final[str] = "elixir"

# --- Demo Configuration ---
DEMO_OPERATIONS: Final[tuple[str, ...]] = ("safe_divide", "parse_number", "chain")
CHAIN_UPPER_BOUND: Final[int] = 100

# --- UI Configuration ---
RICH_SYNTAX_THEME: Final[str] = "monokai"
SNIPPET_LEXER: Final[str] = "python"

# --- Logging Configuration ---
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# --- SSoT Enforcement ---
__all__ = [
    "CHAIN_UPPER_BOUND",
    "DEFAULT_LANGUAGE",
    "DEMO_OPERATIONS",
    "EXAMPLES_FILE",
    "LOG_FORMAT",
    "RICH_SYNTAX_THEME",
    "ROOT_DIR",
    "SNIPPET_LEXER",
    "SUPPORTED_LANGUAGES",
]
