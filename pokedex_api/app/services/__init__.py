"""
Service layer.

Business logic lives here so that API handlers only decode requests
and render the ``ShapedResponse`` they get back.
"""
