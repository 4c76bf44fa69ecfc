# errors.py


class AchievementError(Exception):
    """Base error for the generation pipeline. Carries the HTTP status and user-facing message."""
    status_code = 500
    message = "Internal server error"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.message)
        self.detail = detail

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(AchievementError):
    status_code = 400
    message = "Missing required fields"


class RateLimitError(AchievementError):
    status_code = 429
    message = "Rate limit exceeded"


class ConfigurationError(AchievementError):
    status_code = 500
    message = "Server misconfiguration: missing Gemini API key"


class UpstreamError(AchievementError):
    status_code = 500
    message = "Failed to generate achievements"
