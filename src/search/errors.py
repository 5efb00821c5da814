"""Search error taxonomy."""


class SearchError(Exception):
    """Any failure while evaluating a search request.

    Malformed requests, invalid ``like`` patterns and unexpected faults all
    surface as this single kind.
    """

    code = "SEARCH_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"error": self.code, "message": self.message}
