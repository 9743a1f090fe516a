# This file defines the plain records returned by repositories.
# Records are frozen dataclasses built from SQL result rows, never live ORM objects.
# `as_payload` shapes each record into the JSON body returned by the routers.

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Company:
    id: int
    name: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Company:
        return cls(id=int(row["id"]), name=str(row["name"]))

    def as_payload(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class Client:
    id: int
    name: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Client:
        return cls(id=int(row["id"]), name=str(row["name"]))

    def as_payload(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class Customer:
    id: int
    firstname: str
    lastname: str
    email: str
    company_id: int
    company_name: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Customer:
        """Build from a customer row joined with its company name."""

        return cls(
            id=int(row["id"]),
            firstname=str(row["firstname"]),
            lastname=str(row["lastname"]),
            email=str(row["email"]),
            company_id=int(row["company_id"]),
            company_name=str(row["company_name"]),
        )

    def as_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "firstname": self.firstname,
            "lastname": self.lastname,
            "email": self.email,
            "company": {"id": self.company_id, "name": self.company_name},
        }


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    brand: str
    description: str | None
    price: float

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Product:
        return cls(
            id=int(row["id"]),
            name=str(row["name"]),
            brand=str(row["brand"]),
            description=row.get("description"),
            price=float(row["price"]),
        )

    def as_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "brand": self.brand,
            "description": self.description,
            "price": self.price,
        }


@dataclass(frozen=True)
class User:
    id: int
    username: str
    email: str
    firstname: str | None
    lastname: str | None
    client_id: int
    client_name: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> User:
        """Build from a user row joined with its client name."""

        return cls(
            id=int(row["id"]),
            username=str(row["username"]),
            email=str(row["email"]),
            firstname=row.get("firstname"),
            lastname=row.get("lastname"),
            client_id=int(row["client_id"]),
            client_name=str(row["client_name"]),
        )

    def as_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "firstname": self.firstname,
            "lastname": self.lastname,
            "client": {"id": self.client_id, "name": self.client_name},
        }
