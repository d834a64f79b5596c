from cryptshortener.server.app import create_app, ShortenerServices


__all__ = [
    'create_app',
    'ShortenerServices',
]
