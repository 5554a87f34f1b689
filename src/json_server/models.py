from pydantic import BaseModel


class EndpointDescriptor(BaseModel):
    name: str
    path: str
