from datetime import datetime

from pydantic import BaseModel


class DatabaseTimeResponse(BaseModel):
    """Server clock reported by the datastore."""

    now: datetime
