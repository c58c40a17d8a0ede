"""
Blog bounded context: domain layer.

Authors write posts; readers attach comments to posts.
A post always references an existing author and owns its comments.
"""
