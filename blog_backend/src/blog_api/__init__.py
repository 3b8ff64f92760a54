"""
FastAPI Blog Posts API package.

Modules:
- store: in-memory BlogPostStore
- routers.blog_posts: HTTP surface under /blogPostsRouter
- main: application factory (`create_app`) and the default `app` instance
"""
