"""Command-line interface for byteio."""
