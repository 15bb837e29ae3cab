from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response, status
from passlib.context import CryptContext

from tourney.core.database import Store
from tourney.core.sessions import SESSION_TOKEN_KEY, AdminIdentity, SessionStore
from tourney.services import (
    auth_service,
    export_service,
    participant_service,
    stats_service,
    tournament_service,
)
from tourney.schemas import auth_schemas, participant_schemas, stats_schemas, tournament_schemas
from tourney.api.dependencies import (
    get_current_admin,
    get_pwd_context,
    get_sessions,
    get_store,
    require_admin,
)

router = APIRouter()

# --- Session ---

@router.post("/login", response_model=auth_schemas.LoginResponse)
def login_endpoint(
    credentials: auth_schemas.LoginRequest,
    request: Request,
    store: Store = Depends(get_store),
    sessions: SessionStore = Depends(get_sessions),
    pwd_context: CryptContext = Depends(get_pwd_context),
):
    admin = auth_service.authenticate(store, credentials.username, credentials.password, pwd_context)
    sessions.destroy(request.session.get(SESSION_TOKEN_KEY))
    request.session[SESSION_TOKEN_KEY] = sessions.create(admin.admin_id, admin.username)
    return auth_schemas.LoginResponse(
        message="Connecté !",
        admin=auth_schemas.AdminRead(id=admin.admin_id, username=admin.username),
    )

@router.post("/logout")
def logout_endpoint(request: Request, sessions: SessionStore = Depends(get_sessions)):
    sessions.destroy(request.session.get(SESSION_TOKEN_KEY))
    request.session.clear()
    return {"success": True}

@router.get("/me", response_model=auth_schemas.WhoAmI, response_model_exclude_none=True)
def me_endpoint(admin: Optional[AdminIdentity] = Depends(get_current_admin)):
    if admin is None:
        return auth_schemas.WhoAmI(authenticated=False)
    return auth_schemas.WhoAmI(
        authenticated=True,
        admin=auth_schemas.AdminRead(id=admin.admin_id, username=admin.username),
    )

@router.post("/change-password")
def change_password_endpoint(
    passwords: auth_schemas.ChangePasswordRequest,
    admin: AdminIdentity = Depends(require_admin),
    store: Store = Depends(get_store),
    pwd_context: CryptContext = Depends(get_pwd_context),
):
    auth_service.change_password(store, admin.admin_id, passwords.currentPassword, passwords.newPassword, pwd_context)
    return {"success": True, "message": "Mot de passe modifié"}

# --- Participants ---

@router.get("/participants", response_model=List[participant_schemas.ParticipantRead])
def list_all_participants_endpoint(
    admin: AdminIdentity = Depends(require_admin),
    store: Store = Depends(get_store),
):
    return participant_service.list_all_participants(store)

@router.delete("/participants/{participant_id}")
def delete_participant_endpoint(
    participant_id: int,
    admin: AdminIdentity = Depends(require_admin),
    store: Store = Depends(get_store),
):
    participant_service.delete_participant(store, participant_id)
    return {"success": True, "message": "Participant supprimé"}

@router.patch("/participants/{participant_id}")
def update_participant_endpoint(
    participant_id: int,
    participant_in: participant_schemas.ParticipantUpdate,
    admin: AdminIdentity = Depends(require_admin),
    store: Store = Depends(get_store),
):
    participant_service.update_participant(store, participant_id, participant_in)
    return {"success": True, "message": "Mis à jour"}

@router.get("/dashboard", response_model=stats_schemas.Dashboard)
def dashboard_endpoint(
    admin: AdminIdentity = Depends(require_admin),
    store: Store = Depends(get_store),
):
    return stats_service.dashboard(store)

# --- Tournaments ---

@router.post("/tournaments", status_code=status.HTTP_201_CREATED)
def create_tournament_endpoint(
    tournament_in: tournament_schemas.TournamentCreate,
    admin: AdminIdentity = Depends(require_admin),
    store: Store = Depends(get_store),
):
    tournament = tournament_service.create_tournament(store, tournament_in)
    return {"success": True, "id": tournament.id}

@router.delete("/tournaments/{tournament_id}")
def delete_tournament_endpoint(
    tournament_id: int,
    admin: AdminIdentity = Depends(require_admin),
    store: Store = Depends(get_store),
):
    tournament_service.delete_tournament(store, tournament_id)
    return {"success": True}

@router.patch("/tournaments/{tournament_id}")
def update_tournament_status_endpoint(
    tournament_id: int,
    status_in: tournament_schemas.TournamentStatusUpdate,
    admin: AdminIdentity = Depends(require_admin),
    store: Store = Depends(get_store),
):
    tournament_service.update_tournament_status(store, tournament_id, status_in)
    return {"success": True}

# --- Export ---

@router.get("/export/csv")
def export_csv_endpoint(
    request: Request,
    admin: AdminIdentity = Depends(require_admin),
    store: Store = Depends(get_store),
):
    filename = request.app.state.settings.CSV_FILENAME
    return Response(
        content=export_service.participants_csv(store),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
