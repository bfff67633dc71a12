"""Pure analytics services."""
