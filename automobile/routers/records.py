from fastapi import APIRouter, Depends

from automobile.dependencies import get_repositories
from automobile.domain.models import (
    Accident,
    Displacement,
    Insurance,
    Maintenance,
    MaintenanceReminder,
    Recharge,
)
from automobile.repositories import Repositories
from automobile.schemas.records import (
    AccidentCreate,
    DisplacementCreate,
    InsuranceCreate,
    MaintenanceCreate,
    MaintenanceReminderCreate,
    RechargeCreate,
)
from automobile.utils.response import success_response

router = APIRouter(prefix="/vehicles/{vehicle_id}", tags=["records"])


@router.get("/accidents")
async def get_accidents(vehicle_id: int, repos: Repositories = Depends(get_repositories)):
    return success_response(data=await repos.accidents.get_by_vehicle(vehicle_id))


@router.post("/accidents", status_code=201)
async def create_accident(vehicle_id: int, payload: AccidentCreate, repos: Repositories = Depends(get_repositories)):
    accident = Accident(vehicle_id=vehicle_id, **payload.model_dump())
    accident_id = await repos.accidents.add(accident)
    return success_response(data=accident.model_copy(update={"id": accident_id}))


@router.get("/insurance")
async def get_insurance(vehicle_id: int, repos: Repositories = Depends(get_repositories)):
    return success_response(data=await repos.insurance.get_by_vehicle(vehicle_id))


@router.post("/insurance", status_code=201)
async def create_insurance(vehicle_id: int, payload: InsuranceCreate, repos: Repositories = Depends(get_repositories)):
    insurance = Insurance(vehicle_id=vehicle_id, **payload.model_dump())
    insurance_id = await repos.insurance.add(insurance)
    return success_response(data=insurance.model_copy(update={"id": insurance_id}))


@router.get("/maintenance")
async def get_maintenance(vehicle_id: int, repos: Repositories = Depends(get_repositories)):
    return success_response(data=await repos.maintenance.get_by_vehicle(vehicle_id))


@router.post("/maintenance", status_code=201)
async def create_maintenance(
    vehicle_id: int, payload: MaintenanceCreate, repos: Repositories = Depends(get_repositories)
):
    maintenance = Maintenance(vehicle_id=vehicle_id, **payload.model_dump())
    maintenance_id = await repos.maintenance.add(maintenance)
    return success_response(data=maintenance.model_copy(update={"id": maintenance_id}))


@router.get("/reminders")
async def get_reminders(vehicle_id: int, repos: Repositories = Depends(get_repositories)):
    return success_response(data=await repos.reminders.get_by_vehicle(vehicle_id))


@router.post("/reminders", status_code=201)
async def create_reminder(
    vehicle_id: int, payload: MaintenanceReminderCreate, repos: Repositories = Depends(get_repositories)
):
    reminder = MaintenanceReminder(vehicle_id=vehicle_id, **payload.model_dump())
    reminder_id = await repos.reminders.add(reminder)
    return success_response(data=reminder.model_copy(update={"id": reminder_id}))


@router.get("/recharges")
async def get_recharges(vehicle_id: int, repos: Repositories = Depends(get_repositories)):
    return success_response(data=await repos.recharges.get_by_vehicle(vehicle_id))


@router.post("/recharges", status_code=201)
async def create_recharge(vehicle_id: int, payload: RechargeCreate, repos: Repositories = Depends(get_repositories)):
    recharge = Recharge(vehicle_id=vehicle_id, **payload.model_dump())
    recharge_id = await repos.recharges.add(recharge)
    return success_response(data=recharge.model_copy(update={"id": recharge_id}))


@router.get("/displacements")
async def get_displacements(vehicle_id: int, repos: Repositories = Depends(get_repositories)):
    return success_response(data=await repos.displacements.get_by_vehicle(vehicle_id))


@router.post("/displacements", status_code=201)
async def create_displacement(
    vehicle_id: int, payload: DisplacementCreate, repos: Repositories = Depends(get_repositories)
):
    displacement = Displacement(vehicle_id=vehicle_id, **payload.model_dump())
    displacement_id = await repos.displacements.add(displacement)
    return success_response(data=displacement.model_copy(update={"id": displacement_id}))
