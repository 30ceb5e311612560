"""HTTP API for the Study Assistant backend."""
