"""Services for swagit."""
