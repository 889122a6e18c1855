# Routes package init
"""
Campus Library Backend — API Routes Package
=============================================

What:  HTTP route handlers that accept requests and return responses.
How:   One module per resource; each exposes a `router` mounted in main.py.

Route Inventory:
    - auth.py:            /api/auth/{register,login,logout,me}
    - profile.py:         /api/profile
    - books.py:           /api/books
    - borrows.py:         /api/book-borrows
    - library_cards.py:   /api/library-card/...
    - rare_books.py:      /api/rare-books, /api/admin/rare-books
    - notes.py:           /api/notes, /api/admin/notes
    - events.py:          /api/events
    - notifications.py:   /api/notifications
    - contact.py:         /api/contact, /api/contact-messages
    - donations.py:       /api/donations
    - admin.py:           /api/admin/users
    - uploads.py:         /server/uploads/{path}
    - health.py:          /health

Design Principle:
    Routes are THIN. They check the session (require_admin / require_login),
    turn multipart uploads into stored paths, call one service method and
    let response_model shape the JSON. Errors propagate to the handlers
    registered in main.py.
"""
