"""
Custom exceptions for the OSRS drop-source service.

Provides specific error types for different failure modes so the HTTP layer
can tell input errors apart from upstream failures.
"""


class DropsError(Exception):
    pass


class MappingError(DropsError):
    pass


class WikiError(DropsError):
    pass


class InvalidItemIdError(DropsError):
    def __init__(self, item_id: object):
        self.item_id = item_id
        super().__init__(f"Invalid item ID: {item_id}")
