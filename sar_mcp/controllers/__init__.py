"""Process front ends: the stdio JSON-RPC bridge and the HTTP proxy API."""
