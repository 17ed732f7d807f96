"""Process-wide collaborators shared by every request."""

import logging
from dataclasses import dataclass

import httpx
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from blockboard.application.interfaces import IdentityProvider, ObjectStorage, TokenIssuer
from blockboard.config import Settings
from blockboard.infrastructure.database import Base, build_engine, build_session_factory
from blockboard.infrastructure.identity.wechat_identity_provider import WeChatIdentityProvider
from blockboard.infrastructure.security.jwt_token_issuer import JwtTokenIssuer
from blockboard.infrastructure.storage.s3_object_storage import S3ObjectStorage

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Long-lived handles (engine, storage client, identity client, token issuer).

    Stored on ``app.state.container`` and read by the request dependencies.
    """

    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    object_storage: ObjectStorage
    identity_provider: IdentityProvider
    token_issuer: TokenIssuer

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContainer":
        engine = build_engine(settings)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=build_session_factory(engine),
            object_storage=S3ObjectStorage(
                endpoint_url=settings.minio_endpoint,
                bucket=settings.minio_bucket,
                access_key=settings.minio_access_key,
                secret_key=settings.minio_secret_key,
                region=settings.minio_region,
                public_base_url=settings.storage_public_base_url,
            ),
            identity_provider=WeChatIdentityProvider(
                app_id=settings.wechat_app_id,
                app_secret=settings.wechat_app_secret,
                session_url=settings.wechat_session_url,
                timeout=settings.wechat_timeout,
                http_client=httpx.AsyncClient(timeout=settings.wechat_timeout),
            ),
            token_issuer=JwtTokenIssuer(
                secret=settings.jwt_secret,
                algorithm=settings.jwt_algorithm,
                expire_minutes=settings.jwt_expire_minutes,
            ),
        )

    async def create_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def startup(self) -> None:
        """Create tables and make sure the image bucket exists."""
        await self.create_tables()
        await self.object_storage.ensure_bucket()
        logger.info("Startup complete: bucket '%s' ready", self.settings.minio_bucket)

    async def shutdown(self) -> None:
        await self.object_storage.close()
        await self.identity_provider.close()
        await self.engine.dispose()
