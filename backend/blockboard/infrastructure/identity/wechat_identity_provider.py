"""WeChat mini-program login client: implements the IdentityProvider interface.

Calls ``jscode2session`` to exchange the ``js_code`` obtained by ``wx.login``
on the client for the user's ``openid`` and ``session_key``.
"""

import logging

import httpx

from blockboard.application.interfaces.identity_provider import (
    ExternalIdentity,
    IdentityProvider,
)
from blockboard.domain.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class WeChatIdentityProvider(IdentityProvider):
    """Infrastructure adapter: connects to the WeChat ``jscode2session`` endpoint."""

    def __init__(
        self,
        app_id: str,
        app_secret: str,
        session_url: str = "https://api.weixin.qq.com/sns/jscode2session",
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._app_id = app_id
        self._app_secret = app_secret
        self._session_url = session_url
        self._timeout = timeout
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return "wechat"

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def exchange_code(self, code: str) -> ExternalIdentity:
        params = {
            "appid": self._app_id,
            "secret": self._app_secret,
            "js_code": code,
            "grant_type": "authorization_code",
        }

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.get(self._session_url, params=params)
        except httpx.HTTPError as exc:
            logger.error("jscode2session request failed: %s", exc)
            raise UpstreamError(
                provider=self.provider_name,
                status_code=None,
                message="Failed to call jscode2session",
            ) from exc
        finally:
            if should_close:
                await client.aclose()

        if response.status_code != 200:
            raise UpstreamError(
                provider=self.provider_name,
                status_code=response.status_code,
                message="jscode2session returned an HTTP error",
            )

        # WeChat answers with a JSON body but a text/plain content type
        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamError(
                provider=self.provider_name,
                status_code=response.status_code,
                message="Invalid jscode2session response",
            ) from exc
        if not isinstance(data, dict):
            raise UpstreamError(
                provider=self.provider_name,
                status_code=response.status_code,
                message="Invalid jscode2session response",
            )

        errcode = data.get("errcode") or 0
        if errcode != 0:
            logger.warning("jscode2session error %s: %s", errcode, data.get("errmsg"))
            raise UpstreamError(
                provider=self.provider_name,
                status_code=errcode,
                message=data.get("errmsg") or "jscode2session error",
            )

        return ExternalIdentity(
            openid=data.get("openid"),
            session_key=data.get("session_key"),
            unionid=data.get("unionid"),
        )

    async def close(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
