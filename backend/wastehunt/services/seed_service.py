# wastehunt/services/seed_service.py
import logging
import secrets
from sqlalchemy.ext.asyncio import AsyncSession
from wastehunt.core.schemas.waste import ReportCreate
from wastehunt.core.security import get_password_hash
from wastehunt.repositories.report_repository import ReportRepository
from wastehunt.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

DEMO_USERNAME = "WasteHunter"

SAMPLE_REPORTS = [
    ReportCreate(title="$20M on Unused Trash Cans", description="Brand new smart trash cans left in storage",
                 amount=20_000_000, location="NYC", year=2023),
    ReportCreate(title="$482M on Monkey Research", description="Study on primate alcohol consumption patterns",
                 amount=482_000_000, location="NIH Labs", year=2023),
    ReportCreate(title="$100M on Alien Probes",
                 description="Research project investigating extraterrestrial communications",
                 amount=100_000_000, location="Area 51", year=2024),
    ReportCreate(title="$15M on Ghost Town Wi-Fi",
                 description="Installing high-speed internet in abandoned mining towns",
                 amount=15_000_000, location="Nevada", year=2024),
    ReportCreate(title="$250M on Luxury Office Renovation",
                 description="Gold-plated fixtures and marble flooring for administrative building",
                 amount=250_000_000, location="Washington DC", year=2024),
    ReportCreate(title="$75M on Robot Dogs", description="Autonomous quadruped robots for office security",
                 amount=75_000_000, location="Pentagon", year=2024),
    ReportCreate(title="$30M on Cosmic Ray Detection",
                 description="Installing cosmic ray detectors in government parking lots",
                 amount=30_000_000, location="Various", year=2024),
    ReportCreate(title="$180M on Virtual Reality Training",
                 description="VR headsets for teaching basic office procedures",
                 amount=180_000_000, location="Federal Offices", year=2024),
    ReportCreate(title="$45M on Artisanal Water", description="Premium bottled water service for government meetings",
                 amount=45_000_000, location="Capitol Hill", year=2024),
    ReportCreate(title="$95M on Time Travel Research",
                 description="Theoretical physics study on bureaucratic efficiency through temporal manipulation",
                 amount=95_000_000, location="DARPA", year=2024),
    ReportCreate(title="Congressional Office Automation",
                 description="New report shows Congress spent $25M on AI tools that remain unused "
                             "due to 'lack of training programs' and 'resistance to change'",
                 amount=25_000_000, location="Congress", year=2024, source="social",
                 author_handle="@GovWatchdog", platform_icon="X",
                 post_url="https://x.com/GovWatchdog/status/1234567890"),
    ReportCreate(title="Digital Transformation Failure",
                 description="$150M digital transformation project abandoned after 2 years. "
                             "Consultants blame 'complex legacy systems'. #GovWaste",
                 amount=150_000_000, location="Department of Government Efficiency", year=2024, source="social",
                 author_handle="@TechOversight", platform_icon="X",
                 post_url="https://x.com/TechOversight/status/1234567891"),
    ReportCreate(title="Redundant Software Licenses",
                 description="FOIA request reveals: agencies spent $85M on duplicate software licenses in 2023.",
                 amount=85_000_000, location="Multiple Agencies", year=2024, source="social",
                 author_handle="@GovSpendingAlert", platform_icon="X",
                 post_url="https://x.com/GovSpendingAlert/status/1234567892"),
    ReportCreate(title="Empty Office Space Costs",
                 description="Federal government still paying $200M annually for empty office space in DC area.",
                 amount=200_000_000, location="Washington DC", year=2024, source="social",
                 author_handle="@FedSpaceWatch", platform_icon="X",
                 post_url="https://x.com/FedSpaceWatch/status/1234567893"),
]


async def seed_demo_data(session: AsyncSession) -> None:
    """Заполнить пустую базу примерами ленты и демо-пользователем"""
    report_repo = ReportRepository(session)
    if await report_repo.count() == 0:
        for report in SAMPLE_REPORTS:
            await report_repo.create(report)
        logger.info(f"Seeded {len(SAMPLE_REPORTS)} sample waste reports")

    user_repo = UserRepository(session)
    if await user_repo.count() == 0:
        # Под демо-аккаунтом не логинятся, пароль случайный
        await user_repo.create(DEMO_USERNAME, get_password_hash(secrets.token_urlsafe(16)))
        logger.info(f"Created demo user {DEMO_USERNAME!r}")
