"""Services around the codec (settings persistence)."""
