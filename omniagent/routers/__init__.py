"""
Routers module - API endpoint handlers organized by feature.

- agent: free-text queries, session context and NLU stats
"""
