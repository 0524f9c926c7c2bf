"""HTTP routes. Each one packs path + body into a request model and hands it to the service."""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveBody,
    MoveRequest,
    RedoRequest,
    RestartRequest,
    UndoRequest,
)
from src.core.config import get_settings
from src.db.database import get_db
from src.db.sql_repository import SQLGameRepository
from src.services.othello_service import OthelloService

router = APIRouter(prefix="/games", tags=["games"])


def get_service(db: Session = Depends(get_db)) -> OthelloService:
    return OthelloService(
        SQLGameRepository(db),
        default_bot_strategy=get_settings().default_bot_strategy,
    )


@router.post("", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
def create_game(
    request: CreateGameRequest, service: OthelloService = Depends(get_service)
) -> GameResponse:
    return service.create_new_game(request)


@router.get("/{game_id}", response_model=GameResponse)
def get_game(game_id: UUID, service: OthelloService = Depends(get_service)) -> GameResponse:
    return service.get_game_state(GetGameRequest(game_id=game_id))


@router.get("/{game_id}/moves", response_model=LegalMovesResponse)
def legal_moves(
    game_id: UUID, service: OthelloService = Depends(get_service)
) -> LegalMovesResponse:
    return service.legal_moves(LegalMovesRequest(game_id=game_id))


@router.post("/{game_id}/moves", response_model=GameResponse)
def make_move(
    game_id: UUID, body: MoveBody, service: OthelloService = Depends(get_service)
) -> GameResponse:
    return service.make_move(MoveRequest(game_id=game_id, square=body.square))


@router.post("/{game_id}/undo", response_model=GameResponse)
def undo(game_id: UUID, service: OthelloService = Depends(get_service)) -> GameResponse:
    return service.undo(UndoRequest(game_id=game_id))


@router.post("/{game_id}/redo", response_model=GameResponse)
def redo(game_id: UUID, service: OthelloService = Depends(get_service)) -> GameResponse:
    return service.redo(RedoRequest(game_id=game_id))


@router.post("/{game_id}/restart", response_model=GameResponse)
def restart(game_id: UUID, service: OthelloService = Depends(get_service)) -> GameResponse:
    return service.restart(RestartRequest(game_id=game_id))


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_game(game_id: UUID, service: OthelloService = Depends(get_service)) -> Response:
    service.delete_game(DeleteGameRequest(game_id=game_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
