"""Wedding-invitation template gallery server."""
