"""
TalkThrough relationship-advice conversation backend.

Builds relationship-specific prompts from survey answers, runs conversation
turns against a generative text backend, and keeps per-session history.
"""

__version__ = "1.0.0"
