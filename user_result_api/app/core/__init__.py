"""Cross-cutting pieces: the ``Result`` type, settings and logging setup."""
