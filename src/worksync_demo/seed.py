"""Demo data seeding for WorkSync.

Creates the demo team and two shifts (today and tomorrow). Seeding is a
no-op when any user already exists, so it never touches real data.

Usage:
    worksync seed-demo
    # or
    python -m worksync_demo.seed
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import timedelta
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from worksync.application.commands import CreateShiftCommand, CreateUserCommand
from worksync.application.context import CallerContext
from worksync.domain.scheduling import day_key
from worksync.domain.shared.time import Clock, SystemClock
from worksync.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine_from_settings,
    create_tables,
)
from worksync.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from worksync_auth import PasswordScheme, PasswordService
from worksync_config.settings import get_settings
from worksync_demo.data import DEMO_PASSWORD, DEMO_SHIFTS, DEMO_USERS

logger = logging.getLogger(__name__)


@dataclass
class SeedStats:
    """Statistics about what was seeded."""

    skipped: bool = False
    user_ids: dict[str, UUID] = field(default_factory=dict)
    shifts_created: int = 0


async def seed_demo_data(
    session: AsyncSession,
    clock: Clock,
    password_service: PasswordService,
) -> SeedStats:
    """
    Create the demo team and shifts in one transaction.

    Parameters
    ----------
    session
        Database session; committed on success
    clock
        Source of "today" for shift placement
    password_service
        Password storage scheme for the demo accounts
    """
    factory = SQLAlchemyRepositoryFactory(session)
    if await factory.user_repository().count() > 0:
        logger.info("Users already exist, demo data not seeded")
        return SeedStats(skipped=True)

    caller = CallerContext.system()
    stats = SeedStats()

    create_user = CreateUserCommand.from_factory(factory, password_service, caller)
    for user_def in DEMO_USERS:
        user = await create_user.execute(
            name=user_def.name,
            username=user_def.username,
            password=DEMO_PASSWORD,
            role=user_def.role,
        )
        stats.user_ids[user_def.key] = user.id

    create_shift = CreateShiftCommand.from_factory(factory, caller)
    today = clock.today()
    for shift_def in DEMO_SHIFTS:
        await create_shift.execute(
            employee_id=stats.user_ids[shift_def.user_key],
            day=day_key(today + timedelta(days=shift_def.day_offset)),
            start_time=shift_def.start_time,
            end_time=shift_def.end_time,
            task=shift_def.task,
        )
        stats.shifts_created += 1

    await session.commit()
    logger.info(
        "Seeded %d users and %d shifts",
        len(stats.user_ids),
        stats.shifts_created,
    )
    return stats


async def _seed() -> SeedStats:
    settings = get_settings()
    engine = create_engine_from_settings(settings)
    try:
        await create_tables(engine)
        session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        async with session_maker() as session:
            return await seed_demo_data(
                session,
                clock=SystemClock(settings.schedule_timezone),
                password_service=PasswordService(
                    scheme=PasswordScheme(settings.password_hashing),
                ),
            )
    finally:
        await engine.dispose()


def main() -> SeedStats:
    """Seed the configured database."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    return asyncio.run(_seed())


if __name__ == "__main__":
    main()
