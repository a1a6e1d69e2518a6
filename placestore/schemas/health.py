from pydantic import BaseModel


class ServiceHealth(BaseModel):
    healthy: bool
    message: str
