class AnalyzeRequestError(Exception):
    """Failure rendered to the client as a ``{"error", "message"}`` JSON body."""

    def __init__(self, status_code: int, error: str, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.message = message

    @classmethod
    def bad_request(cls, error: str, message: str) -> "AnalyzeRequestError":
        return cls(400, error, message)

    @classmethod
    def internal(cls) -> "AnalyzeRequestError":
        return cls(500, "Internal server error", "An error occurred while analyzing the text")
