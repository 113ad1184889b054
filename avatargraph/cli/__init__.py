"""Command implementations for the avatargraph CLI."""
