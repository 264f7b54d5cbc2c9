"""Centralized exceptions for sitelink."""


class SitelinkError(Exception):
    """Base exception for all sitelink errors."""


class UnknownEntityError(SitelinkError):
    """Raised when a caller asks for a site, channel or content that the store does not hold.

    The resolvers never raise this; they degrade to the unclickable URL. It is
    meant for entry points (the CLI) that must load the starting record.
    """

    def __init__(self, kind: str, entity_id: int) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind.capitalize()} {entity_id} not found")
