"""
Java Analyzer - static analysis queries over Java codebases.

Provides:
- Batch queries: many constructors, many constructor parameters, singleton types
- An interactive session that loads a codebase once and queries it repeatedly
- An MCP server exposing the batch queries as tools
- Java parsing (tree-sitter based)
"""

__version__ = "0.1.0"
