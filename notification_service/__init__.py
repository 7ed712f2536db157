"""Realtime notification delivery with durable storage.

The package is layered: ``domain`` holds the entities and errors,
``infrastructure`` the database, repositories and live connection registry,
``application`` the use cases, and ``interfaces`` the HTTP API and websocket
channel built on FastAPI.
"""
