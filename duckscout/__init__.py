"""
duckscout - DuckDuckGo search and page fetching for agents
"""

__version__ = "0.1.0"
