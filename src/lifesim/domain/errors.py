class PersistenceError(RuntimeError):
    """A key-value backend could not read or write a blob."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"{key}: {message}")
        self.key = key
