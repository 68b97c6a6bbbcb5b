"""
Main entry point for the Monado CLI.

This module serves as the entry point when running the package as a module:
    python -m monado

or after installation:
    monado
"""

from .main import app

if __name__ == "__main__":
    app()
