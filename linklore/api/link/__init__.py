"""Link API domain: wikilink grammar, parser and resolver."""
