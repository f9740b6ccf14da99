"""
Company repository - data access for Company entity.
"""
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.core.exceptions import CompanyNotFoundException, DuplicateCompanyException
from jobboard.repositories.base import BaseRepository, Row
from jobboard.sql import COMPANY_FILTERS


class CompanyRepository(BaseRepository):
    def __init__(self):
        super().__init__(
            table="companies",
            key_column="handle",
            columns=("handle", "name", "description", "num_employees", "logo_url"),
            order_by="name",
            name_map={
                "numEmployees": "num_employees",
                "logoUrl": "logo_url",
            },
            filters=COMPANY_FILTERS,
        )

    def not_found(self, key: Any) -> CompanyNotFoundException:
        return CompanyNotFoundException(key)

    async def create(
        self,
        db: AsyncSession,
        data: Mapping[str, Any],
    ) -> Row:
        """
        Create a company.

        ``data`` uses the API field names:
        ``{handle, name, description, numEmployees, logoUrl}``.

        Raises:
            DuplicateCompanyException: If the handle is already taken
        """
        if await self.exists(db, data["handle"]):
            raise DuplicateCompanyException(data["handle"])

        return await self.insert(db, {
            "handle": data["handle"],
            "name": data["name"],
            "description": data["description"],
            "num_employees": data.get("numEmployees"),
            "logo_url": data.get("logoUrl"),
        })
