"""Small helpers shared across avatargraph packages."""
