"""Application layer.

This layer contains *use cases* (application services) and the command
boundary used by the front-end.

Rule of thumb:
UI -> application.commands -> application.use_cases -> features/core
"""
