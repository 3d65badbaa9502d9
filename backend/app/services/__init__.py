"""
Inkpost Backend — Services Layer
==================================

Business rules between the routes (HTTP) and the database (persistence).
Each service is a stateless class with a module-level singleton; methods
take the request's AsyncSession and raise app.exceptions on failure.

Service Inventory:
    - token_service:      issue / validate signed, time-limited bearer tokens
    - credential_service: signup and login against stored bcrypt hashes
    - ownership:          one place deciding 404 vs 403 for foreign records
    - media_service:      upload validation and data-URL encoding
    - task_service:       private per-user tasks
    - blog_service:       public posts, owner-only mutation
    - comment_service:    comments on posts
    - engagement_service: likes and shares with counters kept in step
"""
