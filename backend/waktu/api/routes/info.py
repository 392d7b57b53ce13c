"""Info Route — static descriptor of the available API routes.

Invariants:
    - GET / always returns 200 with exactly three route descriptors
    - Registered before the static-file mount, so it wins over public/index.html
"""

from fastapi import APIRouter, status

from waktu.core.domain_types import FeedCategory
from waktu.schemas.info import RouteInfo, ServiceInfo

router = APIRouter(tags=["info"])

SERVICE_INFO = ServiceInfo(
    name="waktu",
    description="Gregorian calendar facts + Wikipedia On This Day",
    routes=[
        RouteInfo(
            path="/calendar?date=YYYY-MM-DD",
            desc="Gregorian calendar info",
        ),
        RouteInfo(
            path=(
                "/onthisday?date=YYYY-MM-DD&type="
                + "|".join(c.value for c in FeedCategory)
            ),
            desc="Wikipedia On This Day",
        ),
        RouteInfo(
            path="/today?date=YYYY-MM-DD",
            desc="Combined calendar + wiki",
        ),
    ],
)


@router.get("/", response_model=ServiceInfo, status_code=status.HTTP_200_OK)
async def service_info():
    """Name, description and route signatures of this service."""
    return SERVICE_INFO
