"""Search engine, board generator and replay session."""
