"""HTTP API, lookup service, and form client for the transaction counter."""
