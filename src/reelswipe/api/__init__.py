"""HTTP layer for ReelSwipe.

- Parses and sanitizes query parameters
- Delegates to provider adapters
- Maps adapter failures to HTTP status codes
"""
