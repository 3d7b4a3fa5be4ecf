from typing import Annotated

from fastapi import Path
from pydantic import BaseModel, Field

INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

# Integers the columns can hold; anything wider is rejected while decoding
Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]

# Record id taken from the URL path
PathId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]

class Message(BaseModel):
    """Body of responses that only confirm an action"""
    message: str
