from typing import Optional, Dict, Any


class NewsApiError(Exception):
    status_code = 500

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ValidationError(NewsApiError):
    status_code = 400

    def __init__(self, errors: list[Dict[str, str]]):
        super().__init__(
            message="; ".join(error["message"] for error in errors) or "Validation failed",
            error_code="VALIDATION_ERROR",
            details={"errors": errors}
        )
        self.errors = errors

    @classmethod
    def from_pydantic_errors(cls, errors: list[Dict[str, Any]]) -> "ValidationError":
        return cls([
            {"field": _error_field(error), "message": _error_message(error)}
            for error in errors
        ])


class NewsNotFoundError(NewsApiError):
    status_code = 404

    def __init__(self, news_id: str):
        super().__init__(
            message=f"News item with ID {news_id} not found",
            error_code="NEWS_NOT_FOUND",
            details={"news_id": news_id}
        )


class JobDeliveryError(NewsApiError):
    pass


_LOCATION_PREFIXES = ("body", "query", "path", "header", "cookie")


def _error_field(error: Dict[str, Any]) -> str:
    loc = [str(part) for part in error.get("loc", ())]
    if len(loc) > 1 and loc[0] in _LOCATION_PREFIXES:
        loc = loc[1:]
    return ".".join(loc) or "body"


def _error_message(error: Dict[str, Any]) -> str:
    field = _error_field(error)
    ctx = error.get("ctx") or {}
    error_type = error.get("type")

    if error_type == "missing":
        return f"{field} is required"
    if error_type == "string_too_short":
        return f"{field} must be at least {ctx.get('min_length')} characters long"
    if error_type == "string_too_long":
        return f"{field} must be at most {ctx.get('max_length')} characters long"
    if error_type == "extra_forbidden":
        return f"{field} is not allowed"
    if error_type == "string_type":
        return f"{field} must be a string"
    if error_type in ("int_parsing", "int_type", "int_from_float"):
        return f"{field} must be an integer"
    if error_type == "greater_than_equal":
        return f"{field} must be greater than or equal to {ctx.get('ge')}"
    if error_type == "less_than_equal":
        return f"{field} must be less than or equal to {ctx.get('le')}"
    return f"{field}: {error.get('msg', 'invalid value')}"
