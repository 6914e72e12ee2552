"""postfind: embedded full-text search and relevance ranking for articles."""
