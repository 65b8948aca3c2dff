"""Person API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from sample_dao.application.dtos.person_dto import (
    CreatePersonDTO,
    PersonCountDTO,
    PersonDTO,
    UpdatePersonDTO,
)
from sample_dao.application.services.person_service import PersonService
from sample_dao.presentation.dependencies import get_person_service

router = APIRouter(prefix="/people", tags=["people"])


@router.post(
    "/",
    response_model=PersonDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new person",
)
async def create_person(
    dto: CreatePersonDTO,
    service: PersonService = Depends(get_person_service),
) -> PersonDTO:
    """
    Create a new person.

    Exception handling is done by global exception handlers.
    """
    return await service.create_person(dto)


@router.get(
    "/count",
    response_model=PersonCountDTO,
    summary="Count persons",
)
async def count_people(
    service: PersonService = Depends(get_person_service),
) -> PersonCountDTO:
    return PersonCountDTO(count=await service.count_people())


@router.get(
    "/{person_id}",
    response_model=PersonDTO,
    summary="Get person by ID",
)
async def get_person(
    person_id: int,
    service: PersonService = Depends(get_person_service),
) -> PersonDTO:
    return await service.get_person(person_id)


@router.get(
    "/",
    response_model=list[PersonDTO],
    summary="List persons",
    description="List all persons, optionally limited or filtered by last name.",
)
async def list_people(
    limit: Optional[int] = Query(default=None, ge=1),
    last_name: Optional[str] = Query(default=None, min_length=1),
    service: PersonService = Depends(get_person_service),
) -> list[PersonDTO]:
    if last_name is not None:
        people = await service.find_by_last_name(last_name)
        return people[:limit] if limit is not None else people
    return await service.list_people(limit=limit)


@router.put(
    "/{person_id}",
    response_model=PersonDTO,
    summary="Update person",
    description="Update the fields present in the request body.",
)
async def update_person(
    person_id: int,
    dto: UpdatePersonDTO,
    service: PersonService = Depends(get_person_service),
) -> PersonDTO:
    return await service.update_person(person_id, dto)


@router.delete(
    "/{person_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete person",
)
async def delete_person(
    person_id: int,
    service: PersonService = Depends(get_person_service),
) -> None:
    await service.delete_person(person_id)
