from typing import List

from fastapi import APIRouter, Depends, status

from tourney.core.database import Store
from tourney.services import participant_service, stats_service, tournament_service
from tourney.schemas import participant_schemas, stats_schemas, tournament_schemas
from tourney.api.dependencies import get_store

router = APIRouter()

@router.post("/register", status_code=status.HTTP_201_CREATED)
def register_endpoint(
    registration: participant_schemas.ParticipantCreate,
    store: Store = Depends(get_store),
):
    participant = participant_service.register_participant(store, registration)
    return {
        "success": True,
        "message": f"{participant.name} inscrit à {participant.game} avec succès !",
        "id": participant.id,
    }

@router.get("/participants", response_model=List[participant_schemas.ParticipantPublic])
def list_participants_endpoint(store: Store = Depends(get_store)):
    return participant_service.list_active_participants(store)

@router.get("/stats", response_model=stats_schemas.PublicStats)
def stats_endpoint(store: Store = Depends(get_store)):
    return stats_service.public_stats(store)

@router.get("/tournaments", response_model=List[tournament_schemas.TournamentRead])
def list_tournaments_endpoint(store: Store = Depends(get_store)):
    return tournament_service.list_tournaments(store)
