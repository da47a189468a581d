from fastapi import Header, HTTPException, Request

from automobile.repositories import Repositories
from automobile.services.reports import ReportsService


async def verify_api_key(request: Request, x_api_key: str = Header(default="")) -> None:
    api_key = request.app.state.settings.api_key
    if not api_key:
        return
    if x_api_key != api_key:
        raise HTTPException(status_code=403, detail="Invalid or missing API key")


def get_repositories(request: Request) -> Repositories:
    return request.app.state.repositories


def get_reports_service(request: Request) -> ReportsService:
    return request.app.state.reports
