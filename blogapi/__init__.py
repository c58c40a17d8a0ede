"""Blog API: authors, posts and comments over REST."""
