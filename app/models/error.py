from pydantic import BaseModel
from typing import List

class FieldError(BaseModel):
    field: str
    message: str
    type: str

class ValidationErrorResponse(BaseModel):
    error: List[FieldError]

class MessageResponse(BaseModel):
    message: str
