"""
slappd - Untappd beer search for Slack

A small FastAPI application that provides:
- A Slack slash command that searches the Untappd beer database
- Interactive result selection with a beer detail card
"""

__version__ = "1.0.0"
__description__ = "Slack slash command for Untappd beer search"
