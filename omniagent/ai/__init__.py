"""
AI Module - natural-language understanding for the agent.

ai/
├── providers/    # OpenAI / Gemini clients behind one AIProvider interface
├── prompts/      # Intent extraction and result summary prompts
├── summarizer.py # Short answers over fetched items
├── intent/       # Schemas, sanitizer, keyword fallback, IntentParser
└── monitoring/   # Structured logs + usage metrics
"""
