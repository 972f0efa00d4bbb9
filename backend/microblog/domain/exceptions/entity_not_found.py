"""
EntityNotFoundError - An identifier that does not resolve to a stored record.
Maps to: HTTP 404 with the plain "Not Found :(" body
"""


class EntityNotFoundError(Exception):
    def __init__(self, entity: str, identifier: str):
        super().__init__(f"{entity} {identifier} not found")
        self.entity = entity
        self.identifier = identifier
