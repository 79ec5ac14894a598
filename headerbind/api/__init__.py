from .dependencies import bind_headers
from .errors import install_error_handlers

__all__ = ["bind_headers", "install_error_handlers"]
