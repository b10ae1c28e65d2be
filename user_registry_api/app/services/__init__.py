"""
Service layer.

Validation is kept in pure functions (``user_validation``) so it can be
reused and tested without a store; ``user_service`` wires it to an
injected ``ObjectCache``.
"""
