"""
SAR MCP - stdio bridge and dashboard proxy for the SAR mission console.

Exposes the remote SAR REST API (event ingest, listing, AI explanations,
alternate routing, geofence alerts, replay) as MCP tools over JSON-RPC.
"""

__version__ = "0.2.0"
