"""Grid of a YouTube channel's latest uploads, built from the public RSS feed."""
