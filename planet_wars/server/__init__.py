"""Session management and network transport."""
