from secrets import compare_digest
from typing import Annotated

from fastapi import Depends, Header, Request, status

from src.api.core.constants import GAME_AUTH_HEADER
from src.api.core.exceptions.base import RankRelayException
from src.api.core.messages import MessageCode
from src.modules.rank.service import RankService
from src.utils.logger import get_logger
from src.utils.settings import Settings

logger = get_logger(__name__)


def get_settings(request: Request) -> Settings:
    """Settings loaded at startup and stored on the app."""
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_settings)]


async def get_rank_service(settings: SettingsDep) -> RankService:
    """Get a rank service bound to the configured Open Cloud credentials."""
    return RankService.from_settings(settings.cloud)


RankServiceDep = Annotated[RankService, Depends(get_rank_service)]


async def require_game_secret(
    settings: SettingsDep,
    game_auth: Annotated[str | None, Header(alias=GAME_AUTH_HEADER)] = None,
) -> None:
    """Reject the request unless it carries the shared game secret."""
    expected = settings.auth.GAME_SHARED_SECRET.get_secret_value()
    if game_auth is None or not compare_digest(
        game_auth.encode("utf-8"), expected.encode("utf-8")
    ):
        logger.warning("Rejected request with bad game secret")
        raise RankRelayException(
            MessageCode.UNAUTHORIZED,
            status.HTTP_401_UNAUTHORIZED,
            {"description": f"Missing or invalid {GAME_AUTH_HEADER} header"},
        )
