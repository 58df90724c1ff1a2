"""Outcome line data models."""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field  # type: ignore


class OutcomeStatus(str, Enum):
    """Status token written by Unity in the fourth field of an outcome line."""

    PASS = "PASS"
    FAIL = "FAIL"
    IGNORE = "IGNORE"


class Outcome(BaseModel):
    """A single classified outcome line."""

    model_config = ConfigDict(frozen=True)

    source_file: str = Field(..., description="C source file the test lives in")
    source_line: str = Field(..., description="Raw text of the line-number field, not converted to int")
    test_name: str = Field(..., description="Name of the test function")
    status: OutcomeStatus = Field(..., description="PASS, FAIL or IGNORE")
    message: str = Field(default="", description="Free text after the status field")
    display: str = Field(..., description="Line as it appears in the report")

    # Provenance
    result_file: Optional[str] = Field(None, description="Result file the line was read from")
    line_number: Optional[int] = Field(None, description="1-based index of the line in its result file")


class Malformed(BaseModel):
    """A line that does not have the outcome shape and is dropped."""

    model_config = ConfigDict(frozen=True)

    line: str
    reason: str


ClassifiedLine = Union[Outcome, Malformed]
