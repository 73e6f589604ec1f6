"""アベンジャーAPIのルーター定義."""

from collections.abc import Callable
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path, Response, status

from avenger_api.avenger.schema import AvengerCreate, AvengerResponse
from avenger_api.database.repository.avenger_repository import (
    AvengerRepository,
    get_avenger_repository,
)

router = APIRouter(prefix="/avengers", tags=["avengers"])

# avenger.id は32bit整数
AVENGER_ID_MIN = -(2**31)
AVENGER_ID_MAX = 2**31 - 1


async def list_avengers(
    repo: Annotated[AvengerRepository, Depends(get_avenger_repository)],
) -> list[AvengerResponse]:
    """登録済みのアベンジャー一覧をID昇順で返す."""
    avengers = await repo.get_all()
    return [AvengerResponse.model_validate(a) for a in avengers]


async def create_avenger(
    payload: AvengerCreate,
    repo: Annotated[AvengerRepository, Depends(get_avenger_repository)],
) -> AvengerResponse:
    """アベンジャーを登録し、採番IDを含む永続化後の行を返す."""
    avenger = await repo.create(name=payload.name)
    return AvengerResponse.model_validate(avenger)


async def delete_avenger(
    avenger_id: Annotated[int, Path(ge=AVENGER_ID_MIN, le=AVENGER_ID_MAX)],
    repo: Annotated[AvengerRepository, Depends(get_avenger_repository)],
) -> Response:
    """指定IDのアベンジャーを削除する.

    該当行の有無にかかわらず204を返す。
    """
    await repo.delete(avenger_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# (path, method, endpoint, status_code, response_model)
ROUTES: tuple[tuple[str, str, Callable[..., Any], int, Any], ...] = (
    ("", "GET", list_avengers, status.HTTP_200_OK, list[AvengerResponse]),
    ("", "POST", create_avenger, status.HTTP_201_CREATED, AvengerResponse),
    ("/{avenger_id}", "DELETE", delete_avenger, status.HTTP_204_NO_CONTENT, None),
)

for path, method, endpoint, status_code, response_model in ROUTES:
    router.add_api_route(
        path,
        endpoint,
        methods=[method],
        status_code=status_code,
        response_model=response_model,
    )
