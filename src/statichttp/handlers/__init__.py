"""
Request handlers: turn a parsed HTTPRequest into an HTTPResponse.

    from statichttp.handlers import StaticFileHandler

    handler = StaticFileHandler("/srv/www")
    response = handler.build(request)
"""

from .static import StaticFileHandler, build_response

__all__ = [
    "StaticFileHandler",
    "build_response",
]
