"""Protocol-agnostic resources used by controllers and middleware."""
