"""docstore API: store facade and command functions."""
