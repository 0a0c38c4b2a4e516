from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"error": "Authentication required", "type": "authentication_error"},
                {"error": "Invalid or expired session", "type": "invalid_session"},
                {"error": "Internal server error", "type": "internal_server_error"},
            ]
        }
    }
