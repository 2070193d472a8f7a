"""Command handlers for the cs01 CLI. Each module exposes run(args) -> int."""
