"""
Inkpost Backend — API Routes Package
======================================

Route Inventory:
    - auth.py:     POST /signup, POST /login
    - tasks.py:    /tasks, /tasks/{id}                     (bearer)
    - blogs.py:    /blogs, /blogposts/{id}[/comments|/like|/share]
    - comments.py: DELETE /comments/{id}                    (bearer)
    - health.py:   GET /health

Routes are thin: parse the request, call one service, wrap the result in
its response envelope. Authorization is the `require_auth` dependency;
errors are raised as exceptions and formatted by the handlers in main.py.
"""
