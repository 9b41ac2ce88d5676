"""HTTP middleware: request ids, CORS, error handling, rate limiting and metrics."""
