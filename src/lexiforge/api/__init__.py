"""HTTP API for LexiForge."""
