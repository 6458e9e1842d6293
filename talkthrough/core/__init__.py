"""Core conversation domain: prompts, response normalization, backend adapter."""
