"""
Album Service

In-memory album record store exposed over HTTP.
Lists, filters, fetches, creates, updates and deletes albums.

Port: 3004
"""

__version__ = "1.0.0"
__service_name__ = "album_service"
__service_port__ = 3004
