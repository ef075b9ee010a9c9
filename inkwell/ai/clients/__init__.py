# inkwell/ai/clients/__init__.py
# Streaming provider clients (OpenRouter, OpenAI, Anthropic); import lazily via factory
