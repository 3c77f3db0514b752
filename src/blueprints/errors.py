"""Errors raised by the blueprint store and service."""


class BlueprintError(Exception):
    """Base class for blueprint errors."""


class InvalidBlueprintError(BlueprintError, ValueError):
    """Author or name missing on create."""


class BlueprintAlreadyExistsError(BlueprintError):
    def __init__(self, author: str, name: str):
        self.author = author
        self.name = name
        super().__init__(f"Blueprint already exists: {author}/{name}")


class BlueprintNotFoundError(BlueprintError, LookupError):
    def __init__(self, author: str, name: str | None = None):
        self.author = author
        self.name = name
        if name is None:
            message = f"No blueprints for author: {author}"
        else:
            message = f"Blueprint not found: {author}/{name}"
        super().__init__(message)
