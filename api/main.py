"""FastAPI backend for a local hot-seat game of Gobblet Gobblers."""

import logging
import os

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from gobblers import Color, Game, GameError, GameResult, Move, MoveError, Size, move_to_notation

logger = logging.getLogger(__name__)

app = FastAPI(title="Gobblet Gobblers API")

# Allow CORS for local development
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("GOBBLERS_CORS_ORIGINS", "http://localhost:5173").split(",")  # Vite dev server
    if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Game state ---

game = Game()
move_notations: list[str] = []  # move_notations[i] = token of move i + 1


def _reset_game() -> None:
    """Start over from the empty board."""
    global game, move_notations
    game = Game()
    move_notations = []


# --- Pydantic models for API ---


class PieceModel(BaseModel):
    color: str  # "yellow" or "red"
    size: int  # 1=small, 2=medium, 3=large


class CellModel(BaseModel):
    cell: int  # 1-9, row-major
    piece: PieceModel | None
    rank: int  # 0 when empty
    label: str  # cell number or piece glyph


class ReservesModel(BaseModel):
    small: int
    medium: int
    large: int


class GameStateModel(BaseModel):
    board: list[CellModel]  # 9 cells, row-major
    reserves: dict[str, ReservesModel]  # "yellow" and "red"
    current_player: str
    result: str  # "in_progress", "yellow_wins", "red_wins", "tie"
    move_count: int
    can_undo: bool
    moves: list[str]  # tokens of the moves played so far


class MoveModel(BaseModel):
    token: str | None = None  # e.g. "a5"; takes precedence over size/cell
    size: int | None = None  # 1=S, 2=M, 3=L
    cell: int | None = None


class LegalMoveModel(BaseModel):
    size: int
    cell: int
    token: str


# --- Helper functions ---


def game_to_model(current: Game) -> GameStateModel:
    """Convert the live game to the API model."""
    board = [
        CellModel(
            cell=view.cell,
            piece=PieceModel(color=view.piece.color.value, size=view.piece.size.value) if view.piece else None,
            rank=view.rank,
            label=view.label,
        )
        for view in current.renderable_board()
    ]

    reserves = {}
    for color in Color:
        remaining = current.all_remaining(color)
        reserves[color.value] = ReservesModel(
            small=remaining[Size.SMALL],
            medium=remaining[Size.MEDIUM],
            large=remaining[Size.LARGE],
        )

    return GameStateModel(
        board=board,
        reserves=reserves,
        current_player=current.current_player.value,
        result=current.evaluate_outcome().value,
        move_count=current.moves_played,
        can_undo=current.can_undo,
        moves=list(move_notations),
    )


def move_to_model(move: Move) -> LegalMoveModel:
    """Convert Move to API model."""
    return LegalMoveModel(size=move.size.value, cell=move.cell, token=move_to_notation(move))


def _error_detail(e: GameError) -> str:
    if isinstance(e, MoveError):
        return f"{e.kind.name}: {e.message}"
    return str(e)


# --- API endpoints ---


@app.get("/game", response_model=GameStateModel)
def get_game():
    """Get current game state."""
    return game_to_model(game)


@app.get("/moves", response_model=list[LegalMoveModel])
def get_moves():
    """Get all legal moves for current player."""
    if game.is_over():
        return []
    return [move_to_model(m) for m in game.legal_moves()]


@app.post("/move", response_model=GameStateModel)
def make_move(move: MoveModel):
    """Make a move for the player whose turn it is."""
    if move.token is not None:
        token = move.token
    else:
        if move.size is None or move.cell is None:
            raise HTTPException(status_code=400, detail="Either token or size and cell are required")
        try:
            token = f"{Size(move.size).letter}{move.cell}"
        except ValueError:
            raise HTTPException(status_code=400, detail=f"INVALID_FORMAT: Unknown size {move.size}")

    if token.strip() in ("u", "q"):
        raise HTTPException(status_code=400, detail="INVALID_FORMAT: Use /undo or /reset")

    try:
        turn = game.play(token)
    except GameError as e:
        raise HTTPException(status_code=400, detail=_error_detail(e))

    assert turn.move is not None
    move_notations.append(move_to_notation(turn.move))
    if turn.outcome != GameResult.IN_PROGRESS:
        logger.info("Game finished: %s", turn.outcome.value)

    return game_to_model(game)


@app.post("/undo", response_model=GameStateModel)
def undo():
    """Undo the last move."""
    try:
        game.undo()
    except MoveError as e:
        raise HTTPException(status_code=400, detail=_error_detail(e))

    move_notations.pop()
    return game_to_model(game)


@app.post("/reset", response_model=GameStateModel)
def reset_game():
    """Reset to a new game."""
    _reset_game()
    return game_to_model(game)


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok"}
