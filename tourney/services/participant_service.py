import logging
from typing import List, Optional

from sqlalchemy import func

from tourney.core.database import Store
from tourney.core.errors import ConflictError, ValidationError
from tourney.models import Participant
from tourney.schemas import participant_schemas

logger = logging.getLogger(__name__)

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 40
ACTIVE = "active"


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def newest_first(query):
    return query.order_by(Participant.created_at.desc(), Participant.id.desc())


def _active_duplicate(db, name: str, game: str, exclude_id: Optional[int] = None) -> Optional[Participant]:
    query = db.query(Participant).filter(
        func.casefold(Participant.name) == name.casefold(),
        func.casefold(Participant.game) == game.casefold(),
        Participant.status == ACTIVE,
    )
    if exclude_id is not None:
        query = query.filter(Participant.id != exclude_id)
    return query.first()


def register_participant(store: Store, registration: participant_schemas.ParticipantCreate) -> Participant:
    """
    Registers a participant for a game.

    Raises ValidationError when name or game is missing or the trimmed name is
    not 2 to 40 characters long, and ConflictError when an active participant
    already holds the same (name, game) pair, compared case-insensitively.
    """
    name = _clean(registration.name)
    game = _clean(registration.game)
    if not name or not game:
        raise ValidationError("Le nom et le jeu sont requis")
    if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        raise ValidationError(f"Nom: {NAME_MIN_LENGTH} à {NAME_MAX_LENGTH} caractères")

    with store.transaction() as db:
        if _active_duplicate(db, name, game):
            raise ConflictError("Tu es déjà inscrit à ce jeu !")

        participant = Participant(
            name=name,
            game=game,
            email=_clean(registration.email),
            phone=_clean(registration.phone),
            status=ACTIVE,
        )
        db.add(participant)
        db.flush()

    logger.info("Registered participant %s for %s (id=%s)", name, game, participant.id)
    return participant


def list_active_participants(store: Store) -> List[Participant]:
    with store.session() as db:
        return newest_first(db.query(Participant).filter(Participant.status == ACTIVE)).all()


def list_all_participants(store: Store) -> List[Participant]:
    with store.session() as db:
        return newest_first(db.query(Participant)).all()


def delete_participant(store: Store, participant_id: int) -> None:
    # A missing id is a silent no-op
    deleted = store.run("DELETE FROM participants WHERE id = :id", {"id": participant_id})
    logger.info("Deleted participant id=%s (%d row(s))", participant_id, deleted)


def update_participant(store: Store, participant_id: int, update: participant_schemas.ParticipantUpdate) -> None:
    """Applies every provided, non-blank field in one transaction; a missing id is a no-op.

    Raises ConflictError when the edited row would be active and share its
    (name, game) pair with another active participant.
    """
    changes = {}
    if update.status and update.status.strip():
        changes["status"] = update.status.strip()
    if update.name and update.name.strip():
        changes["name"] = update.name.strip()
    if update.game and update.game.strip():
        changes["game"] = update.game.strip()

    with store.transaction() as db:
        participant = db.query(Participant).filter(Participant.id == participant_id).first()
        if participant is None or not changes:
            return
        for key, value in changes.items():
            setattr(participant, key, value)
        if participant.status == ACTIVE and _active_duplicate(
            db, participant.name, participant.game, exclude_id=participant.id
        ):
            raise ConflictError("Ce participant est déjà inscrit à ce jeu")

    logger.info("Updated participant id=%s with %s", participant_id, sorted(changes))
