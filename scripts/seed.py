"""
Seed script - populates the database with sample data for development.

Usage:
    python -m scripts.seed

This script is IDEMPOTENT - running it twice won't create duplicates.
Rows that already exist are skipped.
"""
import asyncio
from decimal import Decimal

from jobboard.core.database import async_session_maker, close_db, init_db
from jobboard.core.exceptions import DuplicateCompanyException, UsernameAlreadyExistsException
from jobboard.repositories import CompanyRepository, JobRepository
from jobboard.services import UserService


# ─── Users ─────────────────────────────────────────────────────

USERS = [
    {
        "username": "admin",
        "password": "admin-password",
        "firstName": "Admin",
        "lastName": "User",
        "email": "admin@jobly.dev",
        "isAdmin": True,
    },
    {
        "username": "testuser",
        "password": "password123",
        "firstName": "Test",
        "lastName": "User",
        "email": "test@jobly.dev",
        "isAdmin": False,
    },
]


# ─── Companies ─────────────────────────────────────────────────

COMPANIES = [
    {
        "handle": "anderson-arias-morrow",
        "name": "Anderson, Arias and Morrow",
        "description": "Somebody program how I. Face give away discussion view act inside.",
        "numEmployees": 245,
        "logoUrl": "/logos/logo3.png",
    },
    {
        "handle": "bauer-gallagher",
        "name": "Bauer-Gallagher",
        "description": "Difficult ready trip question produce produce someone.",
        "numEmployees": 862,
    },
    {
        "handle": "netsol",
        "name": "Netsol Technologies",
        "description": "Software for the leasing and finance industry.",
        "numEmployees": 12,
        "logoUrl": "/logos/logo1.png",
    },
    {
        "handle": "sellers-bryant",
        "name": "Sellers-Bryant",
        "description": "Language discuss mission soon. Ask program seat.",
        "numEmployees": 369,
    },
]


# ─── Jobs ──────────────────────────────────────────────────────
# equity is a fraction of the company (0 to 1); None means not offered

JOBS = [
    {"title": "Conservator, furniture", "salary": 110000, "equity": Decimal("0"), "companyHandle": "anderson-arias-morrow"},
    {"title": "Information officer", "salary": 200000, "equity": None, "companyHandle": "anderson-arias-morrow"},
    {"title": "Consulting civil engineer", "salary": 60000, "equity": Decimal("0"), "companyHandle": "bauer-gallagher"},
    {"title": "Software engineer", "salary": 150000, "equity": Decimal("0.05"), "companyHandle": "netsol"},
    {"title": "Senior software engineer", "salary": 185000, "equity": Decimal("0.08"), "companyHandle": "netsol"},
    {"title": "Sales engineer", "salary": None, "equity": Decimal("0.01"), "companyHandle": "sellers-bryant"},
]


async def seed():
    """Run the seed process."""
    print("Seeding database...")

    await init_db()
    print("  Tables created")

    user_service = UserService()
    company_repo = CompanyRepository()
    job_repo = JobRepository()

    async with async_session_maker() as db:

        # ── Users ──────────────────────────────────────────
        for user in USERS:
            try:
                await user_service.register(db, user)
                print(f"  Created user: {user['username']}")
            except UsernameAlreadyExistsException:
                print(f"  User {user['username']} already exists, skipping...")

        # ── Companies ──────────────────────────────────────
        new_companies = set()
        for company in COMPANIES:
            try:
                await company_repo.create(db, company)
                new_companies.add(company["handle"])
            except DuplicateCompanyException:
                print(f"  Company {company['handle']} already exists, skipping...")
        print(f"  Created {len(new_companies)} companies")

        # ── Jobs ───────────────────────────────────────────
        # Jobs have no natural key, so only freshly created companies get them
        created = 0
        for job in JOBS:
            if job["companyHandle"] in new_companies:
                await job_repo.create(db, job)
                created += 1
        print(f"  Created {created} jobs")

        await db.commit()

    await close_db()

    print("\nSeed complete!")
    print("\n  Login credentials:")
    for user in USERS:
        role = "admin" if user["isAdmin"] else "user"
        print(f"    {role:<5}  {user['username']} / {user['password']}")


if __name__ == "__main__":
    asyncio.run(seed())
