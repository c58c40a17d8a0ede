"""HTTP interface for authors, posts and comments."""
