class AddressEntryError(Exception):
    """
    Base for every failure surfaced to the user during an address entry.
    The message is shown as-is by the rendering layer.
    """
    error_type = "address_entry_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigurationError(AddressEntryError):
    error_type = "configuration"


class ValidationError(AddressEntryError):
    error_type = "validation"


class TransportError(AddressEntryError):
    error_type = "transport"


class FormatError(AddressEntryError):
    error_type = "format"


class MalformedRecordError(FormatError):
    """Raised when a raw lookup record lacks the fields its identity is derived from."""
    error_type = "malformed_record"


class NotFoundError(AddressEntryError):
    error_type = "not_found"


class SelectionError(AddressEntryError):
    error_type = "selection"


class SearchInProgressError(AddressEntryError):
    error_type = "search_in_progress"

    def __init__(self, message: str = "A search is already in progress"):
        super().__init__(message)
