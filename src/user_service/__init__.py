"""
user_service — the "update user" request handler from the ROP talk.

Validates an update request, stores it, and sends a confirmation,
chaining every step on the railway so that the first failure is the
one reported back to the caller.
"""

__version__ = "0.1.0"
