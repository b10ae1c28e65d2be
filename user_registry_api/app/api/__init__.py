"""
API package.

``router`` aggregates the domain routers; ``main`` mounts it under
``/api``.
"""
