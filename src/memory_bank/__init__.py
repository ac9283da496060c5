"""Memory bank: markdown session notes served over MCP stdio."""

__version__ = "0.1.0"
