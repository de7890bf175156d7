from pydantic import BaseModel, Field


class CountdownParts(BaseModel):
    """Whole units remaining until the countdown target"""

    days: int = Field(..., ge=0)
    hours: int = Field(..., ge=0, lt=24)
    minutes: int = Field(..., ge=0, lt=60)
    seconds: int = Field(..., ge=0, lt=60)


class CountdownFrame(BaseModel):
    """One rendered state of the countdown"""

    finished: bool = False
    parts: CountdownParts | None = None
    message: str | None = None
