"""API package - request handlers grouped by resource."""
