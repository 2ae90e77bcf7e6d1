"""Types and response envelopes shared by the guest and order endpoints."""

from typing import Annotated, Union

from pydantic import AfterValidator, BaseModel, StrictInt, StrictStr

# Gallery ids and timestamps are stored as text, but some clients send
# them as JSON numbers (numeric ids, epoch milliseconds).
TextValue = Annotated[Union[StrictStr, StrictInt], AfterValidator(str)]


class CreatedResponse(BaseModel):
    success: bool = True
    id: int
    message: str


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ClearedResponse(BaseModel):
    """Result of a bulk delete; ``deleted`` is the number of rows removed."""

    success: bool = True
    message: str
    deleted: int
