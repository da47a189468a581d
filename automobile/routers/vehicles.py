from contextlib import aclosing

from fastapi import APIRouter, Depends

from automobile.dependencies import get_repositories, get_reports_service
from automobile.repositories import Repositories
from automobile.schemas.vehicle import VehicleCreate
from automobile.services.reports import ReportsService
from automobile.utils.exceptions import VehicleNotFound
from automobile.utils.response import success_response

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


@router.get("")
async def get_vehicles(repos: Repositories = Depends(get_repositories)):
    async with aclosing(repos.garage.get_vehicles()) as snapshots:
        vehicles = await anext(snapshots)
    return success_response(data=vehicles)


@router.post("", status_code=201)
async def create_vehicle(payload: VehicleCreate, repos: Repositories = Depends(get_repositories)):
    vehicle_id = await repos.garage.add_vehicle(payload.to_domain())
    vehicle = await repos.garage.get_vehicle_by_id(vehicle_id)
    return success_response(data=vehicle)


@router.get("/{vehicle_id}")
async def get_vehicle(vehicle_id: int, repos: Repositories = Depends(get_repositories)):
    vehicle = await repos.garage.get_vehicle_by_id(vehicle_id)
    if vehicle is None:
        raise VehicleNotFound(vehicle_id)
    return success_response(data=vehicle)


@router.put("/{vehicle_id}")
async def update_vehicle(vehicle_id: int, payload: VehicleCreate, repos: Repositories = Depends(get_repositories)):
    if await repos.garage.get_vehicle_by_id(vehicle_id) is None:
        raise VehicleNotFound(vehicle_id)
    await repos.garage.update_vehicle(payload.to_domain(vehicle_id))
    vehicle = await repos.garage.get_vehicle_by_id(vehicle_id)
    return success_response(data=vehicle)


@router.delete("/{vehicle_id}")
async def delete_vehicle(vehicle_id: int, repos: Repositories = Depends(get_repositories)):
    await repos.garage.delete_vehicle(vehicle_id)
    return success_response(message="Vehicle deleted")


@router.get("/{vehicle_id}/report")
async def get_vehicle_report(
    vehicle_id: int,
    repos: Repositories = Depends(get_repositories),
    reports: ReportsService = Depends(get_reports_service),
):
    if await repos.garage.get_vehicle_by_id(vehicle_id) is None:
        raise VehicleNotFound(vehicle_id)
    report = await reports.vehicle_report(vehicle_id)
    return success_response(data=report)
