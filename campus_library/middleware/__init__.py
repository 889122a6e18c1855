# Middleware package init
"""
Campus Library Backend — Middleware Package
=============================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [Session] → [GZip] → [CORS] → Route Handler

    1. Request ID first so every later log line can carry it
    2. Logging wraps everything below it, so its duration covers the handler
    3. Session (Starlette SessionMiddleware) decodes the signed cookie into
       request.session and writes it back on the response
"""
