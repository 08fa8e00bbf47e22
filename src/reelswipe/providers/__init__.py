"""Provider adapters for third-party video APIs.

Each adapter implements the narrow interface ``search(query) -> FeedPage``:
one outbound GET, then a reshape of the upstream JSON into ``FeedItem``s.
Adapters never build HTTP responses; the router owns status mapping.
"""
