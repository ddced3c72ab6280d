"""Version parsing, metadata extraction and resolution."""
