from pydantic import BaseModel

class StatusMessage(BaseModel):
    message: str
    affected_rows: int
