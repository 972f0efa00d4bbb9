"""
AccessDeniedError - A signed-in user acting on a record they do not own.
Maps to: HTTP 403 with the plain "Forbidden :(" body
"""


class AccessDeniedError(Exception):
    def __init__(self, action: str, resource: str):
        super().__init__(f"Not allowed to {action} {resource}")
        self.action = action
        self.resource = resource
