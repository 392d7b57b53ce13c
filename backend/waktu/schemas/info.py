"""Info Schemas — static service descriptor served at the root path."""

from pydantic import BaseModel


class RouteInfo(BaseModel):
    path: str
    desc: str


class ServiceInfo(BaseModel):
    name: str
    description: str
    routes: list[RouteInfo]
