"""
Exceptions raised by the template normalizer and loader.
"""


class TemplateError(Exception):
    """Base class for template errors"""


class DuplicateIdentifierError(TemplateError):
    """Two distinct elements claim the same explicit instance id"""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Instance id '{identifier}' is used by more than one element")


class TemplateFormatError(TemplateError):
    """A template document cannot be turned into elements"""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path or 'root'}: {message}")
