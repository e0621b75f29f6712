"""Infrastructure: error classification and the HTTP client."""
