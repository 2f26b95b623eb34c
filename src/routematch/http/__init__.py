"""HTTP value types — query parameters extracted from request URLs."""
