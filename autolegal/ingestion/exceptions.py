class EncodingError(Exception):
    """Raised when an uploaded file cannot be read or encoded.

    The failed file is not staged; files staged earlier are unaffected.
    """

    kind = "encoding"

    def __init__(self, file_name: str, reason: str) -> None:
        self.file_name = file_name
        self.reason = reason
        self.message = f"Не удалось прочитать файл '{file_name}': {reason}"
        super().__init__(self.message)
