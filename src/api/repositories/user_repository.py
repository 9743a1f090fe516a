# This file implements data access for users scoped to their client.
# The user listing is unpaginated and ordered by id.

from __future__ import annotations

import logging

from src.api.api_config import ApiConfig
from src.api.db_access import DatabaseClient
from src.api.entities import Client, User

logger = logging.getLogger(__name__)


class UserRepository:
    """Listing, lookup, insert, and delete for users."""

    def __init__(self, *, config: ApiConfig, db: DatabaseClient) -> None:
        self.db = db
        self.user_table = config.validate_table_name(config.user_table_name)
        self.client_table = config.validate_table_name(config.client_table_name)

    def _select_sql(self) -> str:
        return f"""
        SELECT
            u.id,
            u.username,
            u.email,
            u.firstname,
            u.lastname,
            u.client_id,
            cl.name AS client_name
        FROM {self.user_table} u
        JOIN {self.client_table} cl ON cl.id = u.client_id
        """

    def list_for_client(self, *, client_id: int) -> list[User]:
        query = f"""
        {self._select_sql()}
        WHERE u.client_id = :client_id
        ORDER BY u.id ASC
        """
        return [User.from_row(row) for row in self.db.fetch_all(query, {"client_id": client_id})]

    def find_one(self, *, client_id: int, user_id: int) -> User | None:
        query = f"""
        {self._select_sql()}
        WHERE u.client_id = :client_id AND u.id = :user_id
        """
        row = self.db.fetch_one(query, {"client_id": client_id, "user_id": user_id})
        return User.from_row(row) if row is not None else None

    def create(
        self,
        *,
        client: Client,
        username: str,
        email: str,
        firstname: str | None = None,
        lastname: str | None = None,
    ) -> User:
        new_id = self.db.insert_returning_id(
            f"""
            INSERT INTO {self.user_table} (username, email, firstname, lastname, client_id)
            VALUES (:username, :email, :firstname, :lastname, :client_id)
            RETURNING id
            """,
            {
                "username": username,
                "email": email,
                "firstname": firstname,
                "lastname": lastname,
                "client_id": client.id,
            },
        )
        logger.info("Created user %s for client %s", new_id, client.id)
        return User(
            id=new_id,
            username=username,
            email=email,
            firstname=firstname,
            lastname=lastname,
            client_id=client.id,
            client_name=client.name,
        )

    def delete(self, *, client_id: int, user_id: int) -> bool:
        deleted = self.db.execute(
            f"DELETE FROM {self.user_table} WHERE client_id = :client_id AND id = :user_id",
            {"client_id": client_id, "user_id": user_id},
        )
        if deleted:
            logger.info("Deleted user %s from client %s", user_id, client_id)
        return deleted > 0
