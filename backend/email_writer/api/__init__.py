from email_writer.api import email_routes

__all__ = [
    "email_routes",
]
