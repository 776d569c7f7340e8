"""Host key/value store backends."""
