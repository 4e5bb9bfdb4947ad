"""API Layer — dispatcher, route handlers, response writer, error handlers.

Invariants:
    - Routes are registered in the dispatcher's route table, not by FastAPI decorators
    - Handlers raise PluginError; only the dispatcher turns errors into responses
"""
