from datetime import timedelta

from fastapi import Depends
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from credential_service.adapter.services.smtp_notifier import SmtpNotifier, SmtpSettings
from credential_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from credential_service.app.services.credential_lifecycle_manager import (
    CredentialLifecycleManager,
)
from credential_service.app.services.credential_policy import CredentialPolicy
from credential_service.app.services.notifier import INotifier
from credential_service.app.services.unit_of_work import UnitOfWork

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


def build_credential_policy() -> CredentialPolicy:
    return CredentialPolicy(
        recovery_code_validity=timedelta(
            minutes=ApplicationConfig.RECOVERY_CODE_VALIDITY_MINUTES
        ),
        generated_password_length=ApplicationConfig.GENERATED_PASSWORD_LENGTH,
        notification_failure_is_fatal=ApplicationConfig.NOTIFICATION_FAILURE_IS_FATAL,
    )


def build_smtp_settings() -> SmtpSettings:
    return SmtpSettings(
        enabled=ApplicationConfig.SMTP_ENABLED,
        host=ApplicationConfig.SMTP_HOST,
        port=ApplicationConfig.SMTP_PORT,
        username=ApplicationConfig.SMTP_USERNAME,
        password=ApplicationConfig.SMTP_PASSWORD,
        from_address=ApplicationConfig.SMTP_FROM_ADDRESS,
        from_name=ApplicationConfig.SMTP_FROM_NAME,
        use_ssl=ApplicationConfig.SMTP_USE_SSL,
        starttls=ApplicationConfig.SMTP_STARTTLS,
    )


credential_policy = build_credential_policy()
smtp_notifier = SmtpNotifier(build_smtp_settings())


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_notifier() -> INotifier:
    return smtp_notifier


def get_credential_policy() -> CredentialPolicy:
    return credential_policy


def get_lifecycle_manager(
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotifier = Depends(get_notifier),
    policy: CredentialPolicy = Depends(get_credential_policy),
) -> CredentialLifecycleManager:
    return CredentialLifecycleManager(uow, notifier, policy)


async def init_db():
    """Create missing tables"""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
