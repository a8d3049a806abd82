from __future__ import annotations

from ..models import ZSFinderTokenResponse
from ._base import BaseService


class AuthService(BaseService):

    async def create_zsfinder_token(self) -> ZSFinderTokenResponse:
        """Issue a short-lived token for the ZSFinder mobile app."""
        return await self._request(
            "auth.create_zsfinder_token", "devices/credentials/token", "POST",
            route="devices/credentials/token")
