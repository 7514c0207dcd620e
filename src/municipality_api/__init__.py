"""Municipality reference-data REST service."""
