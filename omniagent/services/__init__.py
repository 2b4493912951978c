"""
Services module - request handling between the HTTP layer and the vendor clients.

- agent_service: parse → route → respond boundary
- action_handlers: per-domain handlers and the routing registry
- session_context: meetings created during this session
- reference_resolver: display name → provider id
"""
