import logging
from typing import List

from tourney.core.database import Store
from tourney.core.errors import ValidationError
from tourney.models import Tournament
from tourney.schemas import tournament_schemas

logger = logging.getLogger(__name__)

DEFAULT_MAX_PLAYERS = 32

def create_tournament(store: Store, tournament: tournament_schemas.TournamentCreate) -> Tournament:
    if not tournament.game or not tournament.name:
        raise ValidationError("Nom et jeu requis")

    with store.transaction() as db:
        db_tournament = Tournament(
            game=tournament.game,
            name=tournament.name,
            max_players=tournament.max_players or DEFAULT_MAX_PLAYERS,
            start_date=tournament.start_date or "",
            prize=tournament.prize or "",
            status="upcoming", # Default status
        )
        db.add(db_tournament)
        db.flush()

    logger.info("Created tournament %r for %s (id=%s)", db_tournament.name, db_tournament.game, db_tournament.id)
    return db_tournament

def list_tournaments(store: Store) -> List[Tournament]:
    with store.session() as db:
        return db.query(Tournament).order_by(Tournament.created_at.desc(), Tournament.id.desc()).all()

def delete_tournament(store: Store, tournament_id: int) -> None:
    # Like participants, deleting an unknown id still succeeds
    store.run("DELETE FROM tournaments WHERE id = :id", {"id": tournament_id})
    logger.info("Deleted tournament id=%s", tournament_id)

def update_tournament_status(store: Store, tournament_id: int, update: tournament_schemas.TournamentStatusUpdate) -> None:
    if update.status:
        store.run(
            "UPDATE tournaments SET status = :status WHERE id = :id",
            {"status": update.status, "id": tournament_id},
        )
        logger.info("Tournament id=%s status set to %r", tournament_id, update.status)
