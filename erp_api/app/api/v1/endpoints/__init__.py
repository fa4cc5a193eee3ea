"""Per-domain routers.  Each module exposes ``router``."""
