from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Statistics Schemas
# ============================================================================


class FrequencyData(BaseModel):
    """Letter count in a message."""

    character: str
    count: int
    frequency: float = Field(ge=0.0, le=1.0)


class ShiftCandidateSchema(BaseModel):
    """A candidate shift with its deciphered text and score."""

    model_config = ConfigDict(from_attributes=True)

    offset: int = Field(ge=0, le=25)
    plaintext: str
    chi_squared: float = Field(ge=0.0)


class ProbabilityTableSchema(BaseModel):
    """A reference letter distribution."""

    name: str
    code: str
    probabilities: dict[str, float]
    total: float


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str = Field(min_length=1, max_length=100_000)
    offset: int | None = None


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str = Field(min_length=1, max_length=100_000)
    offset: int | None = None
    language: str | None = None


class AnalyzeRequest(BaseModel):
    """Request schema for /analyze endpoint."""

    ciphertext: str = Field(min_length=1, max_length=100_000)
    language: str | None = None
    limit: int | None = Field(default=None, ge=1, le=26)


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    plaintext: str
    ciphertext: str
    offset: int


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    offset: int
    language: str
    recovered: bool
    explanation: str


class AnalyzeResponse(BaseModel):
    """Response schema for /analyze endpoint."""

    normalized: str
    language: str
    letter_count: int
    frequencies: list[FrequencyData]
    chi_squares: list[float]
    best_offset: int
    plaintext: str
    candidates: list[ShiftCandidateSchema]
    explanation: str


class TablesResponse(BaseModel):
    """Response schema for /tables endpoint."""

    items: list[ProbabilityTableSchema]
    total: int


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
