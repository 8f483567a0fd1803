"""Discourse domain: forum account mappings and the forum HTTP client."""
