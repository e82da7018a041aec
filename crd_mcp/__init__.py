"""MCP server exposing the Collaborative Reference Database (CRD) search API."""

__version__ = "0.1.0"
