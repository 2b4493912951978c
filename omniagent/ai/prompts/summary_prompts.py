"""
Result Summary Prompts - a short answer over items fetched for the user.

The model sees the user's request and a JSON preview of the first few
items. It must only restate what is in the data.
"""

# ---------------------------------------------------------------------------
# RESULT SUMMARY PROMPT
# ---------------------------------------------------------------------------

RESULT_SUMMARY_SYSTEM_PROMPT = "Summarize the provided data clearly. Do not invent information."

RESULT_SUMMARY_PROMPT = """User asked: "{query}"

Here is the relevant data ({label}):
{preview}

Give a concise 2-3 sentence response."""
