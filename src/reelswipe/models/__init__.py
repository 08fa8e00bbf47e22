"""Response and query models shared by adapters and routes."""
