"""Settings, logging, database access and shared error values."""
