"""
FastAPI Todo Backend package.

The ASGI application lives in ``src.api.main:app``; ``src.api.client`` holds the
HTTP client and the client-side view state.
"""
