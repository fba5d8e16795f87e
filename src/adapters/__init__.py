"""I/O adapters: HTTP clients for the Google Cloud REST APIs."""
