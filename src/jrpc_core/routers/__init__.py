"""HTTP routers for the JSON-RPC service."""
