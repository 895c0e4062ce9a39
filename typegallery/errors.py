# typegallery/errors.py
# Fetch failures; every kind shows the same message to the user

LISTING_UNAVAILABLE = "listing_unavailable"
DETAIL_UNAVAILABLE = "detail_unavailable"
UNKNOWN_TYPE = "unknown_type"


class FetchError(Exception):
    """Base error for the two-stage type fetch. `kind` names the failing stage."""

    kind = "fetch_error"

    def __init__(self, type_name: str, detail: str = ""):
        self.type_name = type_name
        self.detail = detail
        msg = f"{self.kind} for type '{type_name}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class ListingUnavailable(FetchError):
    kind = LISTING_UNAVAILABLE


class DetailUnavailable(FetchError):
    kind = DETAIL_UNAVAILABLE


class UnknownType(FetchError):
    kind = UNKNOWN_TYPE
