"""
OmniAgent - one natural-language entry point for Google Workspace,
Microsoft 365, Shopify, Telegram and Teams.

Run with: uvicorn omniagent.main:app --reload
"""
