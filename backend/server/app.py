from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from .schemas import AIMoveRequest, ConfigRequest, MoveRequest
from .session import GameSession

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="Checkers Rules Engine", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    session = GameSession()

    def get_session() -> GameSession:
        return session

    @app.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/board")
    def read_board(session: GameSession = Depends(get_session)):
        return session.serialize()

    @app.get("/valid-moves")
    def read_valid_moves(
        row: int = Query(...),
        col: int = Query(...),
        session: GameSession = Depends(get_session),
    ):
        try:
            return session.get_valid_moves(row, col)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/move")
    def play_move(payload: MoveRequest, session: GameSession = Depends(get_session)):
        try:
            return session.make_move(payload)
        except ValueError as exc:
            logger.debug("Rejected move: %s", exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc

    @app.post("/ai-move")
    def ai_move(payload: AIMoveRequest, session: GameSession = Depends(get_session)):
        try:
            return session.run_ai_move(payload)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc

    @app.post("/reset")
    def reset_game(session: GameSession = Depends(get_session)):
        return session.reset()

    @app.post("/config")
    def configure_players(payload: ConfigRequest, session: GameSession = Depends(get_session)):
        try:
            return session.configure_players(payload)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    return app


app = create_app()
