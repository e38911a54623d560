"""Example models and the resources that fetch them."""

from typing import ClassVar

from pydantic import BaseModel, Field

from .resource import Resource

ACRONYMS_URL = "http://localhost:8080/acronyms"
PEOPLE_URL = "https://swapi.co/api/people"


class Acronym(BaseModel):
    id: int
    short: str
    long: str

    all: ClassVar[Resource]


class Person(BaseModel):
    name: str
    gender: str
    birth: str = Field(alias="birth_year")


class PeopleResponse(BaseModel):
    results: list[Person]

    people: ClassVar[Resource]


Acronym.all = Resource.get(ACRONYMS_URL, list[Acronym])
PeopleResponse.people = Resource.get(PEOPLE_URL, PeopleResponse)

RESOURCES = {
    "acronyms": (list[Acronym], ACRONYMS_URL),
    "people": (PeopleResponse, PEOPLE_URL),
}
