"""
Seed script to populate the database with a demo resume
Run with: python -m seed_data
"""
import asyncio
from resume_builder.database import async_session_maker, init_db
from resume_builder.models import Resume
from resume_builder.services.auth import create_access_token

DEMO_USER_ID = "demo-user"


async def seed_database():
    await init_db()

    async with async_session_maker() as db:
        resume = Resume(
            user_id=DEMO_USER_ID,
            title="Demo Resume",
            professional_summary=(
                "Full-stack developer with 5 years of experience shipping React and Python "
                "applications, focused on reliable APIs and clean user interfaces."
            ),
            skills=["Python", "FastAPI", "React", "PostgreSQL", "Docker"],
            personal_info={
                "image": "",
                "profession": "Full-Stack Developer",
                "full_name": "Alex Morgan",
                "email": "alex.morgan@example.com",
                "phone": "+1 555 010 2030",
                "location": "Denver, CO",
                "website": "https://alexmorgan.dev",
            },
            experience=[
                {
                    "company": "Brightline Labs",
                    "position": "Senior Developer",
                    "start_date": "2022-01",
                    "end_date": "",
                    "description": "Built the customer billing portal used by 40k accounts.",
                    "is_current": True,
                },
                {
                    "company": "Northwind",
                    "position": "Developer",
                    "start_date": "2019-06",
                    "end_date": "2021-12",
                    "description": "Migrated reporting jobs from cron scripts to a task queue.",
                    "is_current": False,
                },
            ],
            projects=[
                {"name": "Trailhead", "type": "Side project", "description": "Hiking trip planner with offline maps."},
            ],
            education=[
                {
                    "institution": "University of Colorado",
                    "degree": "B.S.",
                    "graduation_date": "2019-05",
                    "field": "Computer Science",
                    "gpa": "3.6",
                },
            ],
            template="modern",
        )
        db.add(resume)
        await db.commit()

        print(f"✅ Created demo resume {resume.id} for {DEMO_USER_ID}")
        print(f"Bearer token: {create_access_token({'sub': DEMO_USER_ID})}")


if __name__ == "__main__":
    asyncio.run(seed_database())
