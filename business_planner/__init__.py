"""Business Planner - template-driven business plan tools over MCP."""

__version__ = "1.0.0"
