"""UI facade for the CLI and the terminal tree viewer."""
