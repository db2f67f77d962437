"""Safe rendering of multilingual, user- and AI-authored post HTML."""
