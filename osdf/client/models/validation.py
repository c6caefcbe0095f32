"""Node validation result."""

from pydantic import BaseModel, ConfigDict


class ValidationReport(BaseModel):
    """Outcome of ``/nodes/validate``.

    The server answers 200 for a compliant document and 422 for a
    non-compliant one; ``message`` is the response body, which lists the
    problems found.
    """

    valid: bool
    message: str = ""

    model_config = ConfigDict(frozen=True)

    def __bool__(self) -> bool:
        return self.valid
