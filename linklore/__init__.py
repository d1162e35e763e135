"""linklore - convert wikilinks into markdown links against a local file index."""
