"""Infrastructure adapters: SQLite storage and access token verification."""
