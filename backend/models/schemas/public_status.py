from typing import Literal

from pydantic import BaseModel


class PublicStatus(BaseModel):
    status: Literal["Fair", "Pending", "Unfair"] = "Pending"
    emoji: str = ""
    message: str = ""
