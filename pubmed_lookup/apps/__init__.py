"""User-facing applications built on the lookup client."""
