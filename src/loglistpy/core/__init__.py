"""Core domain: log events, the level classifier and assertions."""
