"""Path and method based request routing with REST parameters and regex segments."""

__version__ = "1.4.3"

__all__ = ["matchers", "methods_handler", "multiplexer"]