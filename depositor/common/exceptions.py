MALFORMED_HEX = 'Malformed hex string'
INVALID_ADDRESS = 'Address must be 0x + 40 hex chars'
MISSING_ADDRESS = 'Withdrawal address is required for withdrawal credentials type 1 or 2'
INVALID_LENGTH = 'Invalid length'
UNSUPPORTED_NETWORK = 'Unsupported network'


class DepositDataError(Exception):
    pass


class MalformedHexError(DepositDataError, ValueError):
    def __init__(self, value: str) -> None:
        super().__init__(f'{MALFORMED_HEX}: {value!r}')
        self.value = value


class InvalidAddressError(DepositDataError, ValueError):
    def __init__(self, address: str) -> None:
        super().__init__(f'{INVALID_ADDRESS}, got {address!r}')
        self.address = address


class MissingAddressError(DepositDataError, ValueError):
    def __init__(self) -> None:
        super().__init__(MISSING_ADDRESS)


class InvalidLengthError(DepositDataError, ValueError):
    def __init__(self, field: str, expected: int | str, actual: int) -> None:
        super().__init__(f'{INVALID_LENGTH} of {field}: expected {expected}, got {actual}')
        self.field = field
        self.expected = expected
        self.actual = actual


class UnsupportedNetworkError(DepositDataError, ValueError):
    def __init__(self, network: str) -> None:
        super().__init__(f'{UNSUPPORTED_NETWORK}: {network}')
        self.network = network


class CollaboratorError(DepositDataError, RuntimeError):
    """Failure inside BLS, SSZ hashing, keystore or mnemonic libraries."""

    def __init__(self, operation: str, error: Exception) -> None:
        super().__init__(f'{operation} failed: {error!r}')
        self.operation = operation
        self.error = error
