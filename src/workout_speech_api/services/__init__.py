"""Services built on top of the speech parsers."""
