"""Terminal tree viewer UI (prompt_toolkit screen and theme)."""
